"""Bridges an EditorSession and its bus events to UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from neocoder.actions.search import SearchResult
from neocoder.actions.snippets import SnippetLike
from neocoder.buffer import BufferMirror, SelectionRange
from neocoder.session import EditorSession, FileSelection

SESSION_EVENTS = (
    "session.open",
    "session.close",
    "buffer.changed",
    "selection.changed",
    "search.results",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_results: Callable[[Sequence[SearchResult]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Translates widget input into session calls and session events into hooks."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        # (session text, widget text) from the last load into the widget.
        self._host_view: Optional[Tuple[str, str]] = None
        self._subscribe_events()
        self._refresh_buffer()

    def open(self, selection: FileSelection) -> None:
        self.session.open_file(selection)
        self.hooks.update_status(f"opened {selection.file_id}")

    def close(self) -> None:
        self.session.close_file()
        self.hooks.update_status("no file open")

    def handle_text_change(self, text: str) -> bool:
        """Commit widget text; echoes of the session's own content are ignored.

        The widget may rewrite line endings when text is loaded into it, so
        the rewritten form of the last load counts as an echo too.
        """

        if text == self.session.content or self._is_host_echo(text):
            return False
        self._log_state("edit ->", length=len(text))
        return self.session.edit(text)

    def note_host_load(self, source_text: str, host_text: str) -> None:
        """Remember how the widget rendered ``source_text`` after loading it."""

        self._host_view = (source_text, host_text)

    def needs_reload(self, mirror_text: str, host_text: str) -> bool:
        if mirror_text == host_text:
            return False
        return not self._is_host_echo(host_text, source_text=mirror_text)

    def handle_cursor(self, offset: int, length: int = 0) -> SelectionRange:
        return self.session.select(offset, length)

    def handle_host_cursor(self, row: int, column: int) -> SelectionRange:
        """Select by widget (row, column), counting rows the way ``str.splitlines`` does.

        The widget breaks rows on more characters than the session treats as
        line breaks (form feeds, ``\\x1c``-``\\x1e``, ``\\u2028`` ...), so rows are
        mapped through the session text split the same way.
        """

        rows = self.session.content.splitlines(keepends=True)
        offset = sum(len(line) for line in rows[: max(0, row)]) + max(0, column)
        return self.session.select(offset)

    def _is_host_echo(self, text: str, *, source_text: Optional[str] = None) -> bool:
        if self._host_view is None:
            return False
        source, rendered = self._host_view
        if source_text is None:
            source_text = self.session.content
        return source == source_text and rendered == text

    def handle_find(self, query: str) -> Tuple[SearchResult, ...]:
        results = self.session.find(query)
        if query:
            self.hooks.update_status(_plural(len(results), "matching line"))
        return results

    def handle_replace(self, query: str, replacement: str) -> str:
        before = self.session.buffer.version
        content = self.session.replace_all(query, replacement)
        if self.session.buffer.version != before:
            self.hooks.update_status(f"replaced {query!r} with {replacement!r}")
        return content

    def handle_format(self, tab_size: Optional[int] = None) -> str:
        content = self.session.format(tab_size)
        self.hooks.update_status("formatted")
        return content

    def handle_snippet(self, snippet: SnippetLike) -> str:
        return self.session.insert_snippet(snippet)

    def handle_go_to_line(self, line_number: int) -> bool:
        moved = self.session.go_to_line(line_number)
        if not moved:
            self.hooks.update_status(f"no line {line_number}")
        return moved

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in SESSION_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        if name == "search.results" and isinstance(payload, tuple):
            self.hooks.show_results(payload)
        else:
            self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        file = self.session.file
        return {
            "state": self.session.state.value,
            "file": file.file_id if file else None,
            "selection": (self.session.selection.offset, self.session.selection.length),
            "version": self.session.buffer.version,
        }


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" + ("" if count == 1 else "s")


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "SESSION_EVENTS"]
