"""Document storage, line indexing, and selection state."""

from .document import DocumentBuffer, text_of
from .lines import LineSpan, count_line_breaks, iter_line_spans, split_lines
from .state import SelectionRange
from .sync import BufferChange, BufferMirror, ContentSink, SettingsSource
from .validation import clamp_offset, clamp_selection

__all__ = [
    "DocumentBuffer",
    "text_of",
    "LineSpan",
    "count_line_breaks",
    "iter_line_spans",
    "split_lines",
    "SelectionRange",
    "BufferChange",
    "BufferMirror",
    "ContentSink",
    "SettingsSource",
    "clamp_offset",
    "clamp_selection",
]
