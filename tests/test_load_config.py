"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from refdoc.deep_merge import deep_merge
from refdoc.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"nested": {"x": 1, "y": 2}}, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3, 4]})
    assert merged == {"arr": [3, 4]}


def test_deep_merge_excluded_namespaces_additive() -> None:
    """Verify that excluded namespaces are merged additively."""
    base = {"exclude_namespaces": ["A", "B"]}
    update = {"exclude_namespaces": ["B", "C"]}
    assert deep_merge(base, update)["exclude_namespaces"] == ["A", "B", "C"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["output"]["root_name"] == "docs"
    assert config["output"]["code_language"] == "csharp"
    assert config["pages"]["skip_type_prefixes"] == ["_"]


def test_load_config_does_not_mutate_defaults(tmp_path: Path) -> None:
    """Verify that loading a config leaves the defaults untouched."""
    config = load_config(None)
    config["pages"]["method_group_spacing"] = True
    assert DEFAULT_CONFIG["pages"]["method_group_spacing"] is False


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "output": {"root_name": "api"},
        "workers": 2,
        "exclude_namespaces": ["N.Internal"],
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["output"]["root_name"] == "api"
    assert loaded["output"]["code_language"] == "csharp"  # Default
    assert loaded["workers"] == 2
    assert loaded["exclude_namespaces"] == ["N.Internal"]


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file leaves the defaults in place."""
    assert load_config(tmp_path / "absent.yml") == DEFAULT_CONFIG
