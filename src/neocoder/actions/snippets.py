"""Snippet insertion at a caret offset."""

from __future__ import annotations

from typing import Protocol

from neocoder.buffer import DocumentBuffer


class SnippetLike(Protocol):
    code: str


def insert(document: DocumentBuffer, text: str, at_offset: int) -> str:
    document.insert_at(text, at_offset)
    return document.content


def insert_snippet(document: DocumentBuffer, snippet: SnippetLike, at_offset: int) -> str:
    # category and language are display concerns; only the code is inserted.
    return insert(document, snippet.code, at_offset)


__all__ = ["SnippetLike", "insert", "insert_snippet"]
