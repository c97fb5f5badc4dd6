"""Shared session types: lifecycle states, file selection, and the event bus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Protocol


class SessionState(str, Enum):
    NO_FILE_OPEN = "no_file_open"
    FILE_OPEN = "file_open"


class StoredFile(Protocol):
    id: str
    content: str


@dataclass(frozen=True, slots=True)
class FileSelection:
    """What the host hands the session when a file is opened.

    ``language`` is passed through for display and never affects editing.
    """

    file_id: str
    content: str
    language: str = ""

    @classmethod
    def from_file(cls, file: StoredFile) -> "FileSelection":
        language = getattr(file, "language", "")
        return cls(
            file_id=file.id,
            content=file.content,
            language=str(getattr(language, "value", language)),
        )


class SessionBus:
    """Minimal event bus letting observers follow session changes.

    Events: ``session.open``, ``session.close``, ``buffer.changed``,
    ``selection.changed``, ``search.results``.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = ["SessionState", "StoredFile", "FileSelection", "SessionBus"]
