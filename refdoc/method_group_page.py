"""Logic for rendering a page for all overloads of one method name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from refdoc.annotations import AnnotationRecord
from refdoc.markdown_writer import MarkdownWriter
from refdoc.operator_symbols import is_operator_name
from refdoc.page import (
    Page,
    PageSettings,
    write_obsolete,
    write_parameters,
    write_remarks,
    write_returns,
    write_summary,
    write_type_parameters,
)
from refdoc.render_signature import display_type, render_signature
from refdoc.symbol_descriptor import SymbolDescriptor
from refdoc.type_page import operator_label
from refdoc.url_title import identifier

if TYPE_CHECKING:
    from refdoc.path_tree import PathTree

Overload = tuple[SymbolDescriptor, AnnotationRecord | None]


def method_group_title(declaring: SymbolDescriptor, name: str) -> str:
    """Heading for a method group, e.g. ``List<T>.Add method``."""
    owner = display_type(declaring)
    if is_operator_name(name):
        return f"{owner} {operator_label(name)}"
    return f"{owner}.{identifier(name)} method"


class MethodGroupPage(Page):
    """Every overload sharing one method name, fewest parameters first."""

    def __init__(
        self,
        declaring: SymbolDescriptor,
        name: str,
        overloads: list[Overload],
        settings: PageSettings,
    ) -> None:
        super().__init__(method_group_title(declaring, name), settings)
        self.declaring = declaring
        self.name = name
        self.overloads = sorted(overloads, key=lambda o: len(o[0].parameters))

    def render(self, node: PathTree[Page], writer: MarkdownWriter) -> None:
        """Write one section per overload."""
        writer.write_header(1, self.title, escaped=True)
        for i, (method, docs) in enumerate(self.overloads):
            self.write_separator(writer, i)
            writer.write_header(2, render_signature(method), escaped=True)
            write_obsolete(writer, method)
            write_summary(writer, docs)
            self.write_signature(writer, 3, method)
            writer.write_line()
            write_type_parameters(writer, 3, method, docs)
            write_parameters(writer, 3, method.parameters, docs)
            write_returns(writer, 3, docs)
            write_remarks(writer, 3, docs)
