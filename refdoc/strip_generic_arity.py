"""Utility for removing generic arity markers from reflected names."""

import re

from refdoc.errors import MalformedSymbolError

# List`1 -> ("List", 1); a marker must be followed by a decimal count.
ARITY_RE = re.compile(r"^(?P<name>[^`]*)`(?P<arity>\d+)$")


def strip_generic_arity(raw_name: str) -> tuple[str, int]:
    """Split a reflected name into its bare name and generic arity.

    The marker is removed exactly once. Names without a backtick have arity 0.
    """
    if "`" not in raw_name:
        return raw_name, 0
    m = ARITY_RE.match(raw_name)
    if not m or not m.group("name"):
        msg = f"Malformed generic arity marker in name: {raw_name!r}"
        raise MalformedSymbolError(msg)
    return m.group("name"), int(m.group("arity"))
