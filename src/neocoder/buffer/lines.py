"""Logical line splitting shared by the buffer, search, and formatter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List

# "\r\n" must be tried before the lone characters so it counts as one break.
LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class LineSpan:
    """One logical line: 1-based number plus its offsets in the content.

    ``end`` is exclusive and stops before the line terminator.
    """

    number: int
    start: int
    end: int
    text: str

    @property
    def length(self) -> int:
        return self.end - self.start


def iter_line_spans(text: str) -> Iterator[LineSpan]:
    start = 0
    number = 1
    for match in LINE_BREAK.finditer(text):
        yield LineSpan(number, start, match.start(), text[start : match.start()])
        start = match.end()
        number += 1
    yield LineSpan(number, start, len(text), text[start:])


def split_lines(text: str) -> List[str]:
    return LINE_BREAK.split(text)


def count_line_breaks(text: str) -> int:
    return sum(1 for _ in LINE_BREAK.finditer(text))


__all__ = [
    "LINE_BREAK",
    "LineSpan",
    "iter_line_spans",
    "split_lines",
    "count_line_breaks",
]
