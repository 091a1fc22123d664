"""Utility for making path-safe page names for types and members."""

import re

from refdoc.symbol_descriptor import SymbolDescriptor

# Conservative: keep letters, digits, underscore, dash.
PATH_SAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")


def path_safe(name: str) -> str:
    """Make a stable filename-ish token."""
    name = PATH_SAFE_RE.sub("-", name).strip("-")
    # Avoid pathological emptiness
    return name or "Unknown"


def url_title(d: SymbolDescriptor) -> str:
    """Page name for a type: List<T> -> List-1, Dictionary<K, V> -> Dictionary-2."""
    arity = len(d.generic_parameters) or len(d.generic_arguments)
    if arity:
        return path_safe(f"{d.bare_name}-{arity}")
    return path_safe(d.bare_name)


def identifier(name: str) -> str:
    """Member name without a generic arity marker, e.g. Select`2 -> Select."""
    if not name.strip():
        return ""
    return name.split("`", 1)[0]
