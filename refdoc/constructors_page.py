"""Logic for rendering the constructor overload page of a type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from refdoc.annotations import AnnotationRecord
from refdoc.markdown_writer import MarkdownWriter
from refdoc.page import (
    Page,
    PageSettings,
    write_obsolete,
    write_parameters,
    write_remarks,
    write_summary,
)
from refdoc.render_signature import display_type, render_signature
from refdoc.symbol_descriptor import SymbolDescriptor

if TYPE_CHECKING:
    from refdoc.path_tree import PathTree

Overload = tuple[SymbolDescriptor, AnnotationRecord | None]


class ConstructorsPage(Page):
    """All constructors of one type, fewest parameters first."""

    def __init__(
        self,
        declaring: SymbolDescriptor,
        overloads: list[Overload],
        settings: PageSettings,
    ) -> None:
        super().__init__(f"{display_type(declaring)} constructors", settings)
        self.declaring = declaring
        self.overloads = sorted(overloads, key=lambda o: len(o[0].parameters))

    def render(self, node: PathTree[Page], writer: MarkdownWriter) -> None:
        """Write one section per constructor overload."""
        writer.write_header(1, self.title, escaped=True)
        for i, (ctor, docs) in enumerate(self.overloads):
            self.write_separator(writer, i)
            writer.write_header(2, render_signature(ctor), escaped=True)
            write_obsolete(writer, ctor)
            write_summary(writer, docs)
            self.write_signature(writer, 3, ctor)
            writer.write_line()
            write_parameters(writer, 3, ctor.parameters, docs)
            write_remarks(writer, 3, docs)
