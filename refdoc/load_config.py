"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from refdoc.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "root_name": "docs",
        "code_language": "csharp",
    },
    "pages": {
        "method_group_spacing": False,
        "skip_type_prefixes": ["_"],
    },
    "workers": 8,
    "exclude_namespaces": [],
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file leaves the defaults in place.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Config file must contain a mapping: {p}"
                raise SystemExit(msg)
            config = deep_merge(config, user_config)
    return config
