"""Markdown output over any text sink."""

from typing import TextIO

ESCAPES = str.maketrans({"<": "\\<", ">": "\\>"})


def md_escape(value: str) -> str:
    """Escape angle brackets so generic names survive Markdown rendering."""
    return value.translate(ESCAPES)


class MarkdownWriter:
    """Writes headers, paragraphs, code blocks and lines to a text stream."""

    def __init__(self, sink: TextIO) -> None:
        """Wrap an open text stream; the caller owns its lifetime."""
        self.sink = sink

    def write(self, text: str) -> None:
        """Write raw text."""
        self.sink.write(text)

    def write_line(self, text: str = "") -> None:
        """Write a single line."""
        self.sink.write(f"{text}\n")

    def write_header(self, rank: int, content: str, *, escaped: bool = False) -> None:
        """Write an ATX header of the given rank."""
        text = md_escape(content) if escaped else content
        self.write_line(f"{'#' * rank} {text}")

    def write_paragraph(self, value: str | None, *, escaped: bool = False) -> None:
        """Write a paragraph followed by a blank line; None writes nothing."""
        if value is None:
            return
        text = md_escape(value) if escaped else value
        self.sink.write(f"{text}\n\n")

    def write_link(self, href: str, title: str) -> None:
        """Write an inline link."""
        self.sink.write(f"[{title}]({href})")

    def write_horizontal_rule(self) -> None:
        """Write a thematic break."""
        self.sink.write("\n***\n")

    def write_info_box(self, message: str, kind: str = "info") -> None:
        """Write an admonition block with an indented body."""
        body = "\n".join(f"    {ln}" for ln in message.split("\n"))
        self.sink.write(f"\n!!! {kind}\n{body}\n\n")

    def write_code_block(self, lang: str, code: str) -> None:
        """Write a fenced code block."""
        self.sink.write(f"```{lang}\n{code.rstrip()}\n```\n")
