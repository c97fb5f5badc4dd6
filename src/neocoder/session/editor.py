"""Editor session: one open file, its buffer, caret, and search results."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, ContextManager, Optional, Tuple

from neocoder.actions import formatting, replace, search, snippets
from neocoder.actions.search import SearchResult
from neocoder.actions.snippets import SnippetLike
from neocoder.buffer import (
    BufferChange,
    BufferMirror,
    ContentSink,
    DocumentBuffer,
    SelectionRange,
    SettingsSource,
    clamp_offset,
    clamp_selection,
)
from neocoder.runtime import telemetry

from .base import FileSelection, SessionBus, SessionState

Clock = Callable[[], datetime]

DEFAULT_TAB_SIZE = 4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EditorSession:
    """Applies edits to the active file and reports them outward.

    Every committed mutation is written through ``sink.on_content_changed``
    synchronously and announced on ``bus`` as ``buffer.changed``. Operations
    that need a file are silent no-ops while no file is open.
    """

    def __init__(
        self,
        *,
        sink: Optional[ContentSink] = None,
        settings: Optional[SettingsSource] = None,
        bus: Optional[SessionBus] = None,
        clock: Optional[Clock] = None,
        name: str = "editor",
    ) -> None:
        self.name = name
        self.sink = sink
        self.settings = settings
        self.bus = bus or SessionBus()
        self._clock = clock or _utcnow
        self.logger = telemetry.get_logger("neocoder.session")
        self._file: Optional[FileSelection] = None
        self._buffer = DocumentBuffer()
        self._selection = SelectionRange()
        self._results: Tuple[SearchResult, ...] = ()
        self._last_query = ""

    @property
    def state(self) -> SessionState:
        if self._file is None:
            return SessionState.NO_FILE_OPEN
        return SessionState.FILE_OPEN

    @property
    def file(self) -> Optional[FileSelection]:
        return self._file

    @property
    def buffer(self) -> DocumentBuffer:
        return self._buffer

    @property
    def content(self) -> str:
        return self._buffer.content

    @property
    def line_numbers(self) -> Tuple[int, ...]:
        return self._buffer.line_numbers

    @property
    def selection(self) -> SelectionRange:
        return self._selection

    @property
    def search_results(self) -> Tuple[SearchResult, ...]:
        return self._results

    @property
    def last_query(self) -> str:
        return self._last_query

    def open_file(self, selection: FileSelection) -> None:
        with self._span("open_file", file_id=selection.file_id):
            self._buffer.remove_listener(self._on_buffer_change)
            self._file = selection
            self._buffer = DocumentBuffer(selection.content)
            self._buffer.add_listener(self._on_buffer_change)
            self._selection = SelectionRange()
            self._results = ()
            self._last_query = ""
        telemetry.record_event(
            "session.open",
            data={"session": self.name, "file": selection.file_id},
        )
        self.bus.emit("session.open", selection)
        self.bus.emit("search.results", self._results)

    def close_file(self) -> None:
        previous = self._file
        if previous is None:
            return
        self._buffer.remove_listener(self._on_buffer_change)
        self._file = None
        self._buffer = DocumentBuffer()
        self._selection = SelectionRange()
        self._results = ()
        self._last_query = ""
        telemetry.record_event(
            "session.close",
            data={"session": self.name, "file": previous.file_id},
        )
        self.bus.emit("session.close", previous)

    def edit(self, text: str) -> bool:
        if not self._require_open("edit"):
            return False
        with self._span("edit"):
            self._buffer.set_content(text, label="edit")
        return True

    def insert_text(self, text: str, offset: Optional[int] = None) -> str:
        """Insert at ``offset`` (default: the caret) and park the caret after it."""

        if not self._require_open("insert_text"):
            return self.content
        target = self._selection.offset if offset is None else offset
        with self._span("insert_text"):
            position = self._buffer.insert_at(text, target)
            self._set_selection(SelectionRange.caret(position + len(text)))
        return self.content

    def insert_snippet(self, snippet: SnippetLike) -> str:
        if not self._require_open("insert_snippet"):
            return self.content
        position = clamp_offset(self._selection.offset, len(self._buffer))
        with self._span("insert_snippet"):
            snippets.insert_snippet(self._buffer, snippet, position)
            self._set_selection(SelectionRange.caret(position + len(snippet.code)))
        return self.content

    def find(self, query: str) -> Tuple[SearchResult, ...]:
        if not self._require_open("find"):
            return ()
        with self._span("find") as handle:
            self._publish_results(query, search.find(self._buffer, query))
            handle.add_metadata("matches", len(self._results))
        return self._results

    def replace_all(self, query: str, replacement: str) -> str:
        """Replace every case-sensitive occurrence, then re-run the search.

        The published results are the lines still matching ``query``
        case-insensitively, not occurrences of ``replacement``.
        """

        if not self._require_open("replace_all"):
            return self.content
        if not query:
            self._publish_results(query, ())
            return self.content
        with self._span("replace_all") as handle:
            outcome = replace.replace_and_search(self._buffer, query, replacement)
            handle.add_metadata("replaced", outcome.replaced)
            self._buffer.set_content(outcome.content, label="replace_all")
            self._publish_results(query, outcome.remaining)
        return self.content

    def format(self, tab_size: Optional[int] = None) -> str:
        if not self._require_open("format"):
            return self.content
        if tab_size is None:
            tab_size = (
                self.settings.tab_size if self.settings is not None else DEFAULT_TAB_SIZE
            )
        unit = formatting.indent_unit(tab_size)
        with self._span("format"):
            formatted = formatting.format_document(self._buffer, unit)
            self._buffer.set_content(formatted, label="format")
        return self.content

    def go_to_line(self, line_number: int) -> bool:
        if not self._require_open("go_to_line"):
            return False
        offset = self._buffer.offset_for_line(line_number)
        if offset is None:
            return False
        self._set_selection(SelectionRange.caret(offset))
        return True

    def select(self, offset: int, length: int = 0) -> SelectionRange:
        if self._require_open("select"):
            self._set_selection(
                clamp_selection(SelectionRange(offset, length), len(self._buffer))
            )
        return self._selection

    def mirror(self) -> BufferMirror:
        attributes = {}
        if self._file is not None:
            attributes = {"file": self._file.file_id, "language": self._file.language}
        return BufferMirror(
            text=self._buffer.content,
            selection=self._selection,
            line_numbers=self._buffer.line_numbers,
            version=self._buffer.version,
            attributes=attributes,
        )

    def _on_buffer_change(self, change: BufferChange) -> None:
        if self._file is None:
            return
        # Subscribers must never see a selection past the new end.
        self._set_selection(clamp_selection(self._selection, len(change.content)))
        self._persist(self._file.file_id, change)
        self.bus.emit("buffer.changed", change)

    def _persist(self, file_id: str, change: BufferChange) -> None:
        if self.sink is None:
            return
        try:
            self.sink.on_content_changed(file_id, change.content, self._clock())
        except Exception as exc:
            # Durability belongs to the sink; a failed write never reaches the buffer.
            telemetry.record_event(
                "session.persist_failed",
                level="warning",
                data={"file": file_id, "label": change.label, "error": str(exc)},
            )

    def _publish_results(self, query: str, results: Tuple[SearchResult, ...]) -> None:
        self._last_query = query
        self._results = results
        self.bus.emit("search.results", results)

    def _set_selection(self, selection: SelectionRange) -> None:
        if selection == self._selection:
            return
        self._selection = selection
        self.bus.emit("selection.changed", selection)

    def _require_open(self, operation: str) -> bool:
        if self._file is not None:
            return True
        telemetry.record_event(
            "session.ignored",
            level="debug",
            data={"session": self.name, "operation": operation},
        )
        return False

    def _span(
        self, label: str, *, file_id: Optional[str] = None
    ) -> ContextManager[telemetry.SpanHandle]:
        if file_id is None and self._file is not None:
            file_id = self._file.file_id
        return telemetry.span(
            name=f"session::{label}",
            component=True,
            metadata={"session": self.name, "file": file_id or "-"},
        )


__all__ = ["EditorSession", "DEFAULT_TAB_SIZE"]
