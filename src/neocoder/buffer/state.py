"""Caret and selection state for an open document."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """``(offset, length)`` into the document; a caret when ``length == 0``."""

    offset: int = 0
    length: int = 0

    @classmethod
    def caret(cls, offset: int) -> "SelectionRange":
        return cls(offset=offset, length=0)

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def is_caret(self) -> bool:
        return self.length == 0
