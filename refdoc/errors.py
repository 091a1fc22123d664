"""Exception types raised while building descriptors and page trees."""


class RefdocError(Exception):
    """Base class for documentation generation errors."""


class MalformedSymbolError(RefdocError):
    """Raised when a raw symbol record cannot be turned into a descriptor."""


class PathInsertionError(RefdocError):
    """Raised when a page path contains an empty or whitespace-only segment."""

    def __init__(self, path: str, index: int) -> None:
        """Record the offending path and the position of the empty segment."""
        super().__init__(f"Empty segment {index} in page path: {path!r}")
        self.path = path
        self.index = index
