"""Logic for rendering property and indexer pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from refdoc.annotations import AnnotationRecord
from refdoc.markdown_writer import MarkdownWriter
from refdoc.page import (
    Page,
    PageSettings,
    owner_name,
    write_obsolete,
    write_parameters,
    write_remarks,
    write_returns,
    write_summary,
)
from refdoc.render_signature import render_signature
from refdoc.symbol_descriptor import SymbolDescriptor

if TYPE_CHECKING:
    from refdoc.path_tree import PathTree


class PropertyPage(Page):
    """Page for one property; indexers also list their index parameters."""

    def __init__(
        self,
        descriptor: SymbolDescriptor,
        docs: AnnotationRecord | None,
        settings: PageSettings,
    ) -> None:
        owner = owner_name(descriptor)
        if descriptor.is_indexer:
            title = f"{owner} indexer {render_signature(descriptor)}"
        else:
            title = f"{owner}.{descriptor.bare_name} property"
        super().__init__(title, settings)
        self.descriptor = descriptor
        self.docs = docs

    def render(self, node: PathTree[Page], writer: MarkdownWriter) -> None:
        """Write the property page."""
        d = self.descriptor
        writer.write_header(1, self.title, escaped=True)
        write_obsolete(writer, d)
        write_summary(writer, self.docs)
        self.write_signature(writer, 2, d)
        writer.write_line()
        write_parameters(writer, 2, d.index_parameters, self.docs)
        write_returns(writer, 2, self.docs)
        write_remarks(writer, 2, self.docs)
