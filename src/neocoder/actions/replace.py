"""Literal replace-all across the whole document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from neocoder.buffer import DocumentBuffer, text_of

from .search import SearchResult, find


@dataclass(frozen=True, slots=True)
class ReplaceOutcome:
    content: str
    remaining: Tuple[SearchResult, ...]
    replaced: int


def replace_all(document: DocumentBuffer | str, query: str, replacement: str) -> str:
    """Replace every occurrence of ``query``, matching case exactly.

    Matching is case-sensitive even though ``find`` is not. An empty query
    leaves the text untouched.
    """

    text = text_of(document)
    if not query:
        return text
    return text.replace(query, replacement)


def replace_and_search(
    document: DocumentBuffer | str, query: str, replacement: str
) -> ReplaceOutcome:
    """Run ``replace_all`` then search the result for the original query."""

    text = text_of(document)
    replaced = text.count(query) if query else 0
    content = replace_all(text, query, replacement)
    return ReplaceOutcome(
        content=content,
        remaining=find(content, query),
        replaced=replaced,
    )


__all__ = ["ReplaceOutcome", "replace_all", "replace_and_search"]
