"""Clamping helpers shared across buffer services.

Out-of-range positions are corrected to the nearest valid boundary instead of
being rejected, so callers on an interactive typing surface never see errors.
"""

from __future__ import annotations

from .state import SelectionRange


def clamp_offset(offset: int, content_length: int) -> int:
    return max(0, min(offset, content_length))


def clamp_selection(selection: SelectionRange, content_length: int) -> SelectionRange:
    offset = clamp_offset(selection.offset, content_length)
    length = max(0, min(selection.length, content_length - offset))
    return SelectionRange(offset=offset, length=length)
