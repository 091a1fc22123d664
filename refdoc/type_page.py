"""Logic for rendering type overview pages."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import TYPE_CHECKING

from refdoc.annotations import AnnotationRecord
from refdoc.markdown_writer import MarkdownWriter, md_escape
from refdoc.operator_symbols import (
    IMPLICIT_CONVERSION,
    is_conversion_name,
    is_operator_name,
    operator_symbol,
)
from refdoc.page import (
    Page,
    PageSettings,
    write_obsolete,
    write_remarks,
    write_summary,
    write_type_parameters,
)
from refdoc.render_signature import (
    DECLARATION,
    display_type,
    render_signature,
    type_title,
)
from refdoc.symbol_descriptor import SymbolDescriptor
from refdoc.url_title import identifier, url_title

if TYPE_CHECKING:
    from refdoc.path_tree import PathTree


@dataclass(frozen=True)
class TypeMembers:
    """The documented members of one type, in declaration order."""

    constructors: tuple[SymbolDescriptor, ...] = ()
    methods: tuple[SymbolDescriptor, ...] = ()
    properties: tuple[SymbolDescriptor, ...] = ()
    fields: tuple[SymbolDescriptor, ...] = ()

    @property
    def indexers(self) -> list[SymbolDescriptor]:
        """Indexer properties; their 1-based position names their page."""
        return [p for p in self.properties if p.is_indexer]

    def method_groups(self) -> list[tuple[str, list[SymbolDescriptor]]]:
        """Methods grouped by name, ordered by name."""
        ordered = sorted(self.methods, key=lambda m: m.bare_name)
        return [
            (name, list(group))
            for name, group in groupby(ordered, key=lambda m: m.bare_name)
        ]


def inheritance_chain(d: SymbolDescriptor) -> str:
    """Render ``Object → Base → Self``, or an empty string for root types."""
    bases = list(d.inheritance)
    if not bases and d.base_type is not None:
        bases = [d.base_type]
    if not bases:
        return ""
    chain = ["Object"]
    chain += [display_type(b) for b in bases if b.full_name != "System.Object"]
    chain.append(display_type(d))
    return " → ".join(chain)


def operator_label(name: str) -> str:
    """Link text for an operator method group, e.g. ``operator +``."""
    if is_conversion_name(name):
        kind = "implicit" if name == IMPLICIT_CONVERSION else "explicit"
        return f"{kind} operator"
    return f"operator {operator_symbol(name)}"


def _is_static_property(p: SymbolDescriptor) -> bool:
    return any(a is not None and a.is_static for a in (p.getter, p.setter))


class TypePage(Page):
    """Overview page of a type with links to its member pages."""

    def __init__(
        self,
        descriptor: SymbolDescriptor,
        docs: AnnotationRecord | None,
        members: TypeMembers,
        settings: PageSettings,
    ) -> None:
        """Initialize the page for a type definition."""
        super().__init__(type_title(descriptor), settings)
        self.descriptor = descriptor
        self.docs = docs
        self.members = members

    def render(self, node: PathTree[Page], writer: MarkdownWriter) -> None:
        """Write the type overview."""
        d = self.descriptor
        writer.write_header(1, self.title, escaped=True)
        write_obsolete(writer, d)
        if d.namespace:
            writer.write_paragraph(f"**Namespace:** {d.namespace}")
        chain = inheritance_chain(d)
        if chain:
            writer.write_paragraph(f"**Inheritance:** {chain}", escaped=True)
        write_summary(writer, self.docs)

        writer.write_header(2, "Signature")
        writer.write_code_block(
            self.settings.code_language, render_signature(d, DECLARATION)
        )
        writer.write_line()
        write_type_parameters(writer, 2, d, self.docs)
        write_remarks(writer, 2, self.docs)

        # Member pages live in a folder named after this page.
        base = url_title(d)
        self._write_constructors(writer, base)
        self._write_methods(writer, base)
        self._write_properties(writer, base)
        self._write_fields(writer, base)
        self._write_operators(writer, base)

    def _write_constructors(self, writer: MarkdownWriter, base: str) -> None:
        if not self.members.constructors:
            return
        writer.write_header(2, "Constructors")
        title = f"{self.descriptor.bare_name} constructors"
        _write_item(writer, f"{base}/ctors.md", title, static=False)
        writer.write_line()

    def _write_methods(self, writer: MarkdownWriter, base: str) -> None:
        groups = [
            (name, group)
            for name, group in self.members.method_groups()
            if not is_operator_name(name)
        ]
        if not groups:
            return
        writer.write_header(2, "Methods")
        for name, group in groups:
            static = all(m.flags.is_static for m in group)
            title = identifier(name)
            _write_item(writer, f"{base}/{title}.md", title, static)
        writer.write_line()

    def _write_properties(self, writer: MarkdownWriter, base: str) -> None:
        props = [p for p in self.members.properties if not p.is_indexer]
        indexers = self.members.indexers
        if not props and not indexers:
            return
        writer.write_header(2, "Properties")
        for p in props:
            href = f"{base}/{p.bare_name}.md"
            _write_item(writer, href, p.bare_name, _is_static_property(p))
        for i, p in enumerate(indexers, start=1):
            title = md_escape(render_signature(p))
            _write_item(writer, f"{base}/this/{i}.md", title, static=False)
        writer.write_line()

    def _write_fields(self, writer: MarkdownWriter, base: str) -> None:
        if not self.members.fields:
            return
        writer.write_header(2, "Fields")
        for f in self.members.fields:
            href = f"{base}/{f.bare_name}.md"
            _write_item(writer, href, f.bare_name, f.flags.is_static)
        writer.write_line()

    def _write_operators(self, writer: MarkdownWriter, base: str) -> None:
        names = [n for n, _ in self.members.method_groups() if is_operator_name(n)]
        if not names:
            return
        writer.write_header(2, "Operators")
        for name in names:
            title = md_escape(operator_label(name))
            _write_item(writer, f"{base}/{name}.md", title, static=False)
        writer.write_line()


def _write_item(writer: MarkdownWriter, href: str, title: str, static: bool) -> None:
    writer.write("- ")
    writer.write_link(href, title)
    writer.write_line(" (static)" if static else "")
