"""Textual host adapter for the editing engine."""

from .controller import SESSION_EVENTS, TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "SESSION_EVENTS"]
