"""Logic for loading symbol manifest YAML files."""

from pathlib import Path
from typing import Any

import yaml

MANIFEST_HEADER_PREFIX = "### SymbolManifest"


def strip_manifest_header(text: str) -> str:
    """Remove the optional manifest header line from the content."""
    lines = text.splitlines()
    if lines and lines[0].startswith(MANIFEST_HEADER_PREFIX):
        return "\n".join(lines[1:]).lstrip("\n")
    return text


def load_symbol_manifest(path: Path) -> dict[str, Any]:
    """Load and parse a symbol manifest written by a reflection dumper."""
    raw = strip_manifest_header(path.read_text(encoding="utf-8"))
    doc = yaml.safe_load(raw)
    if doc is not None and not isinstance(doc, dict):
        msg = f"Symbol manifest must be a mapping: {path}"
        raise SystemExit(msg)
    return doc or {}
