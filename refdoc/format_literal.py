"""Utility for rendering constant and default values as C# literals."""

from typing import Any

from refdoc.symbol_descriptor import SymbolDescriptor


def format_literal(value: Any, value_type: SymbolDescriptor | None = None) -> str:
    """Format a constant the way it would appear in a declaration.

    The declared type decides between the textual forms YAML cannot tell
    apart (a one-letter string vs. a char, a float vs. a double).
    """
    if value is None:
        return "null"
    type_name = value_type.innermost().full_name if value_type is not None else ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if type_name == "System.Char":
        return f"'{value}'"
    if isinstance(value, str):
        return f'"{value}"'
    if type_name == "System.Single":
        return f"{value}f"
    if type_name == "System.Double" or (not type_name and isinstance(value, float)):
        return f"{value}d"
    return str(value)
