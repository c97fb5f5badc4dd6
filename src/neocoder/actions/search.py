"""Line-anchored, case-insensitive search over a document snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from neocoder.buffer import DocumentBuffer, SelectionRange, iter_line_spans, text_of


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A matching logical line.

    ``range`` covers the whole physical line (terminator excluded), not just
    the matched substring.
    """

    line_number: int
    line_text: str
    range: SelectionRange


def find(document: DocumentBuffer | str, query: str) -> Tuple[SearchResult, ...]:
    if not query:
        return ()
    needle = query.casefold()
    return tuple(
        SearchResult(
            line_number=span.number,
            line_text=span.text,
            range=SelectionRange(offset=span.start, length=span.length),
        )
        for span in iter_line_spans(text_of(document))
        if needle in span.text.casefold()
    )


__all__ = ["SearchResult", "find"]
