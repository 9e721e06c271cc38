"""Comment-aware line scanner for PlantUML sources.

PlantUML has two comment forms: a line starting with a single quote, and
block comments delimited by /' and '/ which may span lines. The scanner
walks the text line by line and character by character, tagging every span
with the comment state it belongs to, so that include directives are only
looked for in code.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

BLOCK_COMMENT_START = "/'"
BLOCK_COMMENT_END = "'/"
LINE_COMMENT_START = "'"


class CommentState(Enum):
    """Comment classification of a span of text."""

    CODE = "code"
    LINE_COMMENT = "line-comment"
    BLOCK_COMMENT = "block-comment"


@dataclass(frozen=True)
class Span:
    """A run of characters on one line sharing the same comment state."""

    state: CommentState
    text: str


@dataclass(frozen=True)
class ScannedLine:
    """A source line split into comment-classified spans.

    Attributes:
        index: Line number (0-indexed)
        text: The full line, without its trailing newline
        spans: Consecutive spans whose texts concatenate to ``text``
    """

    index: int
    text: str
    spans: tuple[Span, ...]

    @property
    def starts_in_code(self) -> bool:
        """Whether the line begins outside of any comment."""
        return not self.spans or self.spans[0].state is CommentState.CODE


def scan_lines(text: str) -> Iterator[ScannedLine]:
    """Lazily scan a document, yielding one ScannedLine per line.

    Lines are split on "\\n" only, so a "\\r" stays part of its line and
    joining the yielded texts with "\\n" gives back the input.

    Args:
        text: The diagram source.

    Yields:
        ScannedLine objects in document order.
    """
    in_block = False
    for index, line in enumerate(text.split("\n")):
        spans, in_block = _split_line(line, in_block)
        yield ScannedLine(index=index, text=line, spans=tuple(spans))


def _split_line(line: str, in_block: bool) -> tuple[list[Span], bool]:
    """Split a single line into spans.

    Args:
        line: The line content.
        in_block: Whether a block comment is open at the start of the line.

    Returns:
        A tuple of (spans, in_block) where in_block tells whether a block
        comment is still open after the line.
    """
    spans: list[Span] = []
    state = CommentState.BLOCK_COMMENT if in_block else CommentState.CODE
    start = 0
    i = 0

    while i < len(line):
        if state is CommentState.BLOCK_COMMENT:
            if line.startswith(BLOCK_COMMENT_END, i):
                i += len(BLOCK_COMMENT_END)
                spans.append(Span(state, line[start:i]))
                start = i
                state = CommentState.CODE
                continue
        elif line.startswith(BLOCK_COMMENT_START, i):
            if i > start:
                spans.append(Span(state, line[start:i]))
            start = i
            state = CommentState.BLOCK_COMMENT
            i += len(BLOCK_COMMENT_START)
            continue
        elif line[i] == LINE_COMMENT_START and not line[:i].strip():
            # Only a quote at the start of a line is a comment, "A -> B : don't" is code
            if i > start:
                spans.append(Span(state, line[start:i]))
            spans.append(Span(CommentState.LINE_COMMENT, line[i:]))
            return spans, False
        i += 1

    if start < len(line):
        spans.append(Span(state, line[start:]))

    return spans, state is CommentState.BLOCK_COMMENT
