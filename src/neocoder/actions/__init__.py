"""Editing verbs applied to a document: search, replace, format, snippets."""

from .formatting import clamp_tab_size, format_document, indent_unit
from .replace import ReplaceOutcome, replace_all, replace_and_search
from .search import SearchResult, find
from .snippets import insert, insert_snippet

__all__ = [
    "SearchResult",
    "find",
    "ReplaceOutcome",
    "replace_all",
    "replace_and_search",
    "clamp_tab_size",
    "format_document",
    "indent_unit",
    "insert",
    "insert_snippet",
]
