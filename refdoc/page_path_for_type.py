"""Utility for determining the tree path of a type's pages."""

from refdoc.symbol_descriptor import SymbolDescriptor
from refdoc.url_title import url_title


def page_path_for_type(d: SymbolDescriptor) -> str:
    """Generate the page tree path for a type definition."""
    # Namespaces become folders: Foo.Bar.Baz -> Foo/Bar/Baz
    if d.declaring is not None:
        return f"{page_path_for_type(d.declaring)}/{url_title(d)}"
    if d.namespace:
        return f"{d.namespace.replace('.', '/')}/{url_title(d)}"
    return url_title(d)
