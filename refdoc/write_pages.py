"""Logic for writing every page of a tree to its own Markdown file."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from refdoc.markdown_writer import MarkdownWriter
from refdoc.output_file_for_page import output_file_for_page
from refdoc.page import Page
from refdoc.path_tree import PathTree


def render_node(node: PathTree[Page], writer: MarkdownWriter) -> None:
    """Render the page attached to a node."""
    if node.page is None:
        msg = f"No page attached at: {node.full_path}"
        raise ValueError(msg)
    node.page.render(node, writer)


def write_page(node: PathTree[Page], out_root: Path) -> Path:
    """Render one page-bearing node to ``<out_root>/<full_path>.md``."""
    out_file = output_file_for_page(out_root, node.full_path)
    with out_file.open("w", encoding="utf-8") as f:
        render_node(node, MarkdownWriter(f))
    return out_file


def write_pages(tree: PathTree[Page], out_root: Path, workers: int = 1) -> int:
    """Write all pages of the tree, in parallel when more than one worker.

    Pages share no mutable state, so they are rendered in any order. The call
    returns once every file is written; the first failure is re-raised.
    """
    nodes = list(tree.enumerate())
    print(f"Writing {len(nodes)} pages...")
    if workers > 1 and len(nodes) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(write_page, n, out_root) for n in nodes]
            for future in as_completed(futures):
                future.result()
    else:
        for n in nodes:
            write_page(n, out_root)
    return len(nodes)
