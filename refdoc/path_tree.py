"""Hierarchical tree of pages addressed by slash-delimited paths."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from refdoc.errors import PathInsertionError

P = TypeVar("P")


class PathTree(Generic[P]):
    """One node of a page tree.

    Inserting a path creates every missing intermediate node without a page.
    A node's full path is fixed when it is created. Building the tree is not
    thread-safe; enumeration is.
    """

    def __init__(self, name: str, parent: PathTree[P] | None = None) -> None:
        """Create a root node, or a child node when a parent is given."""
        self.name = name
        self.parent = parent
        self.full_path = f"{parent.full_path}/{name}" if parent is not None else name
        self.children: dict[str, PathTree[P]] = {}
        self.page: P | None = None

    def __repr__(self) -> str:
        return f"PathTree({self.full_path!r}, page={self.page is not None})"

    def insert(self, path: str, page: P) -> PathTree[P]:
        """Attach a page at the given path, creating nodes as needed.

        Raises PathInsertionError on an empty segment; nodes created for
        earlier segments of the same path are kept.
        """
        node = self
        for i, part in enumerate(_segments(path)):
            if not part:
                raise PathInsertionError(path, i)
            child = node.children.get(part)
            if child is None:
                child = node.children[part] = PathTree(part, node)
            node = child
        node.page = page
        return node

    def get_node(self, path: str) -> PathTree[P] | None:
        """Return the node at a path, or None if any segment is missing."""
        node: PathTree[P] | None = self
        for part in _segments(path):
            if not part or node is None:
                return None
            node = node.children.get(part)
        return node

    def lookup(self, path: str) -> P | None:
        """Return the page stored at a path, or None if there is none."""
        node = self.get_node(path)
        return node.page if node is not None else None

    def enumerate(self) -> Iterator[PathTree[P]]:
        """Yield every node in the subtree that carries a page."""
        stack: list[PathTree[P]] = [self]
        while stack:
            node = stack.pop()
            if node.page is not None:
                yield node
            stack.extend(node.children.values())


def insert(root: PathTree[P], path: str, page: P) -> PathTree[P]:
    """Attach a page to the tree at the given path."""
    return root.insert(path, page)


def lookup(root: PathTree[P], path: str) -> P | None:
    """Return the page at the given path, or None."""
    return root.lookup(path)


def enumerate_pages(root: PathTree[P]) -> Iterator[PathTree[P]]:
    """Yield every page-bearing node of the tree."""
    return root.enumerate()


def _segments(path: str) -> list[str]:
    return [part.strip() for part in path.split("/")]
