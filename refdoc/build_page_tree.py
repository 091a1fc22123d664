"""Logic for walking manifest types into a tree of pages.

The walk is single-threaded: every type and member is converted to a
descriptor, keyed against the annotation store and inserted into the tree.
A symbol that fails to convert or insert is logged and skipped; the rest of
the run carries on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from refdoc.annotations import AnnotationRecord, AnnotationStore
from refdoc.build_descriptor import (
    constructor_descriptor,
    field_descriptor,
    method_descriptor,
    property_descriptor,
    type_definition,
)
from refdoc.constructors_page import ConstructorsPage
from refdoc.encode_identity import encode_identity
from refdoc.errors import MalformedSymbolError, PathInsertionError
from refdoc.field_page import FieldPage
from refdoc.method_group_page import MethodGroupPage
from refdoc.page import Page, PageSettings
from refdoc.page_path_for_type import page_path_for_type
from refdoc.path_tree import PathTree
from refdoc.property_page import PropertyPage
from refdoc.symbol_descriptor import SymbolDescriptor
from refdoc.type_page import TypeMembers, TypePage

logger = logging.getLogger(__name__)

# Compiler-generated property and event accessors get no page of their own.
ACCESSOR_PREFIXES = ("get_", "set_", "add_", "remove_")

MemberBuilder = Callable[[Any, SymbolDescriptor], SymbolDescriptor]


@dataclass
class BuildReport:
    """Outcome of one walk."""

    pages: int = 0
    failures: list[str] = field(default_factory=list)


class _Walk:
    def __init__(
        self,
        store: AnnotationStore,
        settings: PageSettings,
        root_name: str,
        skip_prefixes: tuple[str, ...],
    ) -> None:
        self.store = store
        self.settings = settings
        self.skip_prefixes = skip_prefixes
        self.root: PathTree[Page] = PathTree(root_name)
        self.report = BuildReport()

    def docs(self, d: SymbolDescriptor) -> AnnotationRecord | None:
        return self.store.annotation_for(encode_identity(d))

    def fail(self, what: str, err: Exception) -> None:
        logger.warning("Skipping %s: %s", what, err)
        self.report.failures.append(f"{what}: {err}")

    def insert(self, path: str, page: Page) -> bool:
        try:
            self.root.insert(path, page)
        except PathInsertionError as e:
            self.fail(page.title, e)
            return False
        self.report.pages += 1
        return True

    def members(
        self,
        raw: dict[str, Any],
        key: str,
        build: MemberBuilder,
        declaring: SymbolDescriptor,
    ) -> list[SymbolDescriptor]:
        out = []
        for rec in raw.get(key) or []:
            try:
                out.append(build(rec, declaring))
            except MalformedSymbolError as e:
                self.fail(f"{key} entry {_raw_name(rec)!r} of {declaring.full_name}", e)
        return out

    def add_type(self, raw: Any, declaring: SymbolDescriptor | None = None) -> None:
        try:
            d = type_definition(raw, declaring)
        except MalformedSymbolError as e:
            self.fail(f"type {_raw_name(raw)!r}", e)
            return

        methods = [
            m
            for m in self.members(raw, "methods", method_descriptor, d)
            if not m.bare_name.startswith(ACCESSOR_PREFIXES)
        ]
        members = TypeMembers(
            constructors=tuple(
                self.members(raw, "constructors", constructor_descriptor, d)
            ),
            methods=tuple(methods),
            properties=tuple(self.members(raw, "properties", property_descriptor, d)),
            fields=tuple(self.members(raw, "fields", field_descriptor, d)),
        )

        path = page_path_for_type(d)
        if not self.insert(path, TypePage(d, self.docs(d), members, self.settings)):
            return
        self.add_member_pages(path, d, members)

        for nested in raw.get("nested") or []:
            if str(_raw_name(nested)).startswith(self.skip_prefixes):
                continue
            self.add_type(nested, d)

    def add_member_pages(
        self, path: str, d: SymbolDescriptor, members: TypeMembers
    ) -> None:
        s = self.settings
        if members.constructors:
            overloads = [(c, self.docs(c)) for c in members.constructors]
            self.insert(f"{path}/ctors", ConstructorsPage(d, overloads, s))

        for name, group in members.method_groups():
            overloads = [(m, self.docs(m)) for m in group]
            self.insert(f"{path}/{name}", MethodGroupPage(d, name, overloads, s))

        for f in members.fields:
            self.insert(f"{path}/{f.bare_name}", FieldPage(f, self.docs(f), s))

        for p in members.properties:
            if not p.is_indexer:
                self.insert(f"{path}/{p.bare_name}", PropertyPage(p, self.docs(p), s))
        for i, p in enumerate(members.indexers, start=1):
            self.insert(f"{path}/this/{i}", PropertyPage(p, self.docs(p), s))


def build_page_tree(
    raw_types: Iterable[Any],
    store: AnnotationStore,
    settings: PageSettings | None = None,
    *,
    root_name: str = "docs",
    skip_prefixes: Iterable[str] = (),
) -> tuple[PathTree[Page], BuildReport]:
    """Build the page tree for a stream of raw type records.

    Nested types are placed under their declaring type's page path. Returns
    the tree root together with a report of inserted pages and skipped
    symbols.
    """
    walk = _Walk(store, settings or PageSettings(), root_name, tuple(skip_prefixes))
    for raw in raw_types:
        walk.add_type(raw)
    logger.debug(
        "Built %d pages, skipped %d symbols",
        walk.report.pages,
        len(walk.report.failures),
    )
    return walk.root, walk.report


def _raw_name(raw: Any) -> str:
    if isinstance(raw, dict):
        return str(raw.get("name") or "")
    return repr(raw)
