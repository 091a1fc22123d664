"""Utility for iterating over the exported types of a symbol manifest."""

from collections.abc import Iterable
from typing import Any


def iter_raw_types(
    doc: dict[str, Any],
    skip_prefixes: Iterable[str] = (),
    exclude_namespaces: Iterable[str] = (),
) -> Iterable[dict[str, Any]]:
    """Iterate over the top-level type records in a manifest document.

    Records are yielded sorted by name so output is stable across runs.
    """
    prefixes = tuple(skip_prefixes)
    excluded = set(exclude_namespaces)
    types = [t for t in doc.get("types") or [] if isinstance(t, dict)]
    for t in sorted(types, key=lambda t: str(t.get("name") or "")):
        name = str(t.get("name") or "")
        if prefixes and name.startswith(prefixes):
            continue
        if t.get("namespace") in excluded:
            continue
        yield t
