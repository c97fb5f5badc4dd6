"""Boundary types for exchanging buffer state with collaborators and hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from .state import SelectionRange


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of the open document."""

    text: str
    selection: SelectionRange
    line_numbers: tuple[int, ...]
    version: int
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class BufferChange:
    """Delivered to buffer listeners after each committed mutation."""

    content: str
    version: int
    label: str


class ContentSink(Protocol):
    """Persistence collaborator notified after every committed edit.

    Implementations own durability. The engine never waits on the call and
    never inspects its outcome.
    """

    def on_content_changed(
        self, file_id: str, content: str, timestamp: datetime
    ) -> None:
        ...


class SettingsSource(Protocol):
    """Read-only view of the editor settings the engine consults."""

    @property
    def tab_size(self) -> int:
        ...

    @property
    def show_line_numbers(self) -> bool:
        ...
