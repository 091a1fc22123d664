"""Logic for rendering field pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from refdoc.annotations import AnnotationRecord
from refdoc.markdown_writer import MarkdownWriter
from refdoc.page import (
    Page,
    PageSettings,
    owner_name,
    write_obsolete,
    write_remarks,
    write_summary,
)
from refdoc.symbol_descriptor import SymbolDescriptor

if TYPE_CHECKING:
    from refdoc.path_tree import PathTree


class FieldPage(Page):
    """Page for one field or enum member."""

    def __init__(
        self,
        descriptor: SymbolDescriptor,
        docs: AnnotationRecord | None,
        settings: PageSettings,
    ) -> None:
        title = f"{owner_name(descriptor)}.{descriptor.bare_name} field"
        super().__init__(title, settings)
        self.descriptor = descriptor
        self.docs = docs

    def render(self, node: PathTree[Page], writer: MarkdownWriter) -> None:
        """Write the field page."""
        writer.write_header(1, self.title, escaped=True)
        write_obsolete(writer, self.descriptor)
        write_summary(writer, self.docs)
        self.write_signature(writer, 2, self.descriptor)
        writer.write_line()
        write_remarks(writer, 2, self.docs)
