"""Editor session lifecycle and change notification."""

from .base import FileSelection, SessionBus, SessionState, StoredFile
from .editor import DEFAULT_TAB_SIZE, EditorSession

__all__ = [
    "EditorSession",
    "DEFAULT_TAB_SIZE",
    "FileSelection",
    "SessionBus",
    "SessionState",
    "StoredFile",
]
