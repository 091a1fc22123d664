"""Tests for literal formatting."""

from refdoc.build_descriptor import type_descriptor
from refdoc.format_literal import format_literal

SINGLE = type_descriptor({"name": "Single", "namespace": "System"})
DOUBLE = type_descriptor({"name": "Double", "namespace": "System"})
CHAR = type_descriptor({"name": "Char", "namespace": "System"})


def test_null_and_booleans() -> None:
    """Verify keyword literals."""
    assert format_literal(None) == "null"
    assert format_literal(True) == "true"
    assert format_literal(False) == "false"


def test_strings_and_chars() -> None:
    """Verify that the declared type decides the quoting."""
    assert format_literal("abc") == '"abc"'
    assert format_literal("a", CHAR) == "'a'"
    assert format_literal("a") == '"a"'


def test_floating_point_suffixes() -> None:
    """Verify float and double suffixes."""
    assert format_literal(1.5, SINGLE) == "1.5f"
    assert format_literal(1.5, DOUBLE) == "1.5d"
    assert format_literal(2.25) == "2.25d"
    assert format_literal(3, DOUBLE) == "3d"


def test_integers() -> None:
    """Verify that integers render as-is."""
    assert format_literal(42) == "42"
    int64 = type_descriptor({"name": "Int64", "namespace": "System"})
    assert format_literal(-1, int64) == "-1"


def test_decimal_renders_natural_form() -> None:
    """Verify that only floating types get a suffix."""
    decimal = type_descriptor({"name": "Decimal", "namespace": "System"})
    assert format_literal(1.5, decimal) == "1.5"
    assert format_literal(10, decimal) == "10"
