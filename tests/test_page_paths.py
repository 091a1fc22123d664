"""Tests for page naming and placement helpers."""

from pathlib import Path

from refdoc.build_descriptor import type_definition
from refdoc.output_file_for_page import output_file_for_page
from refdoc.page_path_for_type import page_path_for_type
from refdoc.url_title import identifier, path_safe, url_title


def test_path_safe() -> None:
    """Test safe filename generation."""
    assert path_safe("Foo") == "Foo"
    assert path_safe("Map<T>") == "Map-T"
    assert path_safe("..Invalid..") == "Invalid"
    assert path_safe("<>") == "Unknown"


def test_url_title() -> None:
    """Test that generic definitions carry their arity in the page name."""
    assert url_title(type_definition({"name": "Foo"})) == "Foo"
    assert url_title(type_definition({"name": "List`1"})) == "List-1"
    assert url_title(type_definition({"name": "Dictionary`2"})) == "Dictionary-2"


def test_identifier() -> None:
    """Test stripping arity markers from member names."""
    assert identifier("Select`2") == "Select"
    assert identifier("Run") == "Run"
    assert identifier("  ") == ""


def test_page_path_for_type() -> None:
    """Test namespace folders and nested type placement."""
    outer = type_definition({"name": "Outer`1", "namespace": "My.Namespace"})
    inner = type_definition({"name": "Inner"}, outer)
    assert page_path_for_type(outer) == "My/Namespace/Outer-1"
    assert page_path_for_type(inner) == "My/Namespace/Outer-1/Inner"
    assert page_path_for_type(type_definition({"name": "Global"})) == "Global"


def test_output_file_for_page(tmp_path: Path) -> None:
    """Test that output files mirror the page path and parents exist."""
    out = output_file_for_page(tmp_path, "docs/N/Foo")
    assert out == tmp_path / "docs" / "N" / "Foo.md"
    assert out.parent.is_dir()
    assert output_file_for_page(tmp_path, "/docs/x") == tmp_path / "docs" / "x.md"
