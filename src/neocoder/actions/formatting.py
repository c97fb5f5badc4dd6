"""Brace-driven re-indentation.

This is a lexical heuristic: braces inside string literals and comments are
counted like any other brace.
"""

from __future__ import annotations

from neocoder.buffer import DocumentBuffer, split_lines, text_of

MIN_TAB_SIZE = 2
MAX_TAB_SIZE = 8


def clamp_tab_size(tab_size: int) -> int:
    return max(MIN_TAB_SIZE, min(MAX_TAB_SIZE, tab_size))


def indent_unit(tab_size: int) -> str:
    return " " * clamp_tab_size(tab_size)


def format_document(document: DocumentBuffer | str, unit: str) -> str:
    """Re-indent every line by brace depth and join with ``\\n``.

    A line containing ``}`` is dedented once before it is emitted; a line
    containing ``{`` indents the lines after it once. Repeated braces on one
    line still move the depth by a single level.
    """

    depth = 0
    formatted: list[str] = []
    for line in split_lines(text_of(document)):
        stripped = line.strip()
        if "}" in stripped:
            depth = max(0, depth - 1)
        formatted.append(unit * depth + stripped)
        if "{" in stripped:
            depth += 1
    return "\n".join(formatted)


__all__ = [
    "MIN_TAB_SIZE",
    "MAX_TAB_SIZE",
    "clamp_tab_size",
    "indent_unit",
    "format_document",
]
