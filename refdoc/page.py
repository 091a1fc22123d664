"""Base page type and the sections member pages have in common."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from refdoc.annotations import AnnotationRecord, summary_of
from refdoc.markdown_writer import MarkdownWriter
from refdoc.render_signature import RenderOptions, display_type, render_signature
from refdoc.symbol_descriptor import SymbolDescriptor

if TYPE_CHECKING:
    from refdoc.path_tree import PathTree

MEMBER_DECLARATION = RenderOptions(include_keywords=True, include_body=True)


@dataclass(frozen=True)
class PageSettings:
    """Rendering switches shared by every page of a run."""

    code_language: str = "csharp"
    method_group_spacing: bool = False


class Page(ABC):
    """One output document attached to a page tree node."""

    def __init__(self, title: str, settings: PageSettings) -> None:
        """Initialize the page with its heading and the run settings."""
        self.title = title
        self.settings = settings

    @abstractmethod
    def render(self, node: PathTree[Page], writer: MarkdownWriter) -> None:
        """Write the page's Markdown."""

    def write_signature(
        self, writer: MarkdownWriter, rank: int, d: SymbolDescriptor
    ) -> None:
        """Write a member's full declaration under a Signature heading."""
        writer.write_header(rank, "Signature")
        writer.write_code_block(
            self.settings.code_language, render_signature(d, MEMBER_DECLARATION)
        )

    def write_separator(self, writer: MarkdownWriter, index: int) -> None:
        """Visually space out consecutive overloads when configured."""
        if not self.settings.method_group_spacing or index == 0:
            return
        writer.write_line()
        writer.write_line("<p>&nbsp;</p>")
        writer.write_line("<p>&nbsp;</p>")
        writer.write_line("<hr/>")
        writer.write_line()


def owner_name(d: SymbolDescriptor) -> str:
    """Display name of the type declaring a member."""
    return display_type(d.declaring) if d.declaring is not None else ""


def write_obsolete(writer: MarkdownWriter, d: SymbolDescriptor) -> None:
    """Write a deprecation warning for obsolete symbols."""
    if d.obsolete is None:
        return
    message = "**This item is deprecated.**"
    if d.obsolete:
        message += f"\n{d.obsolete}"
    writer.write_info_box(message, "warning")


def write_summary(writer: MarkdownWriter, docs: AnnotationRecord | None) -> None:
    """Write the summary paragraph, or the placeholder when undocumented."""
    writer.write_paragraph(summary_of(docs))


def write_type_parameters(
    writer: MarkdownWriter,
    rank: int,
    d: SymbolDescriptor,
    docs: AnnotationRecord | None,
) -> None:
    """List generic parameters with their descriptions."""
    if not d.generic_parameters:
        return
    writer.write_header(rank, "Type Parameters")
    for tp in d.generic_parameters:
        desc = docs.type_parameter_description(tp.bare_name) if docs else None
        writer.write_line(f"- `{tp.bare_name}`: {desc or summary_of(None)}")
    writer.write_line()


def write_parameters(
    writer: MarkdownWriter,
    rank: int,
    params: tuple[SymbolDescriptor, ...],
    docs: AnnotationRecord | None,
) -> None:
    """List parameters with their descriptions."""
    if not params:
        return
    writer.write_header(rank, "Parameters")
    for p in params:
        desc = docs.parameter_description(p.bare_name) if docs else None
        writer.write_line(f"- `{p.bare_name}`: {desc or summary_of(None)}")
    writer.write_line()


def write_returns(
    writer: MarkdownWriter, rank: int, docs: AnnotationRecord | None
) -> None:
    """Write the Returns section when documented."""
    if docs is None or not docs.returns:
        return
    writer.write_header(rank, "Returns")
    writer.write_paragraph(docs.returns)


def write_remarks(
    writer: MarkdownWriter, rank: int, docs: AnnotationRecord | None
) -> None:
    """Write the Remarks section when documented."""
    if docs is None or not docs.remarks:
        return
    writer.write_header(rank, "Remarks")
    writer.write_paragraph(docs.remarks)
