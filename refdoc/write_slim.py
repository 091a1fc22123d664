"""Logic for writing every page of a tree into one Markdown document."""

from __future__ import annotations

from pathlib import Path

from refdoc.markdown_writer import MarkdownWriter
from refdoc.page import Page
from refdoc.path_tree import PathTree
from refdoc.write_pages import render_node


def write_slim(tree: PathTree[Page], out_file: Path) -> int:
    """Render all pages, ordered by full path, into a single file."""
    nodes = sorted(tree.enumerate(), key=lambda n: n.full_path)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    with out_file.open("w", encoding="utf-8") as f:
        writer = MarkdownWriter(f)
        for i, node in enumerate(nodes):
            if i:
                writer.write_horizontal_rule()
                writer.write_line()
            render_node(node, writer)
    return len(nodes)
