"""Text storage for a single open file."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .lines import LineSpan, count_line_breaks, iter_line_spans
from .sync import BufferChange
from .validation import clamp_offset

ChangeListener = Callable[[BufferChange], None]


class DocumentBuffer:
    """Owns one document's content and its derived line numbers.

    Line numbers are rebuilt from the content after every mutation. Each
    mutating call notifies registered listeners exactly once, synchronously.
    """

    def __init__(self, text: str = "") -> None:
        self._content = text
        self._line_numbers: Tuple[int, ...] = _derive_line_numbers(text)
        self._listeners: List[ChangeListener] = []
        self.version = 0

    @property
    def content(self) -> str:
        return self._content

    def get_content(self) -> str:
        return self._content

    @property
    def line_numbers(self) -> Tuple[int, ...]:
        return self._line_numbers

    def line_count(self) -> int:
        return len(self._line_numbers)

    def __len__(self) -> int:
        return len(self._content)

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_content(self, text: str, *, label: str = "set_content") -> None:
        self._commit(text, label)

    def insert_at(self, text: str, offset: int) -> int:
        """Insert ``text`` at ``offset`` clamped into the content.

        Returns the offset actually used.
        """

        position = clamp_offset(offset, len(self._content))
        updated = self._content[:position] + text + self._content[position:]
        self._commit(updated, "insert_at")
        return position

    def line_spans(self) -> Tuple[LineSpan, ...]:
        return tuple(iter_line_spans(self._content))

    def offset_for_line(self, line_number: int) -> Optional[int]:
        """Return the start offset of ``line_number`` (1-based), if it exists."""

        if line_number < 1 or line_number > self.line_count():
            return None
        for span in iter_line_spans(self._content):
            if span.number == line_number:
                return span.start
        return None

    def _commit(self, text: str, label: str) -> None:
        self._content = text
        self._line_numbers = _derive_line_numbers(text)
        self.version += 1
        change = BufferChange(content=text, version=self.version, label=label)
        for listener in list(self._listeners):
            listener(change)


def _derive_line_numbers(text: str) -> Tuple[int, ...]:
    return tuple(range(1, max(1, count_line_breaks(text) + 1) + 1))


def text_of(source: "DocumentBuffer | str") -> str:
    """Accept either a buffer or a raw string snapshot."""

    if isinstance(source, DocumentBuffer):
        return source.content
    return source
