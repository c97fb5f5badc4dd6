from __future__ import annotations

from typing import List, Sequence

from neocoder.actions.search import SearchResult
from neocoder.adapters.textual import TextualEditorAdapter, TextualUIHooks
from neocoder.buffer import BufferMirror
from neocoder.session import EditorSession, FileSelection
from neocoder.workspace import CodeSnippet, ProgrammingLanguage, ProjectStore


def make_adapter(
    hooks: TextualUIHooks, *, store: ProjectStore | None = None
) -> TextualEditorAdapter:
    session = EditorSession(sink=store)
    return TextualEditorAdapter(session, hooks)


def test_adapter_pushes_buffer_on_open_and_edit() -> None:
    mirrors: List[BufferMirror] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=mirrors.append,
        update_status=statuses.append,
    )
    adapter = make_adapter(hooks)

    adapter.open(FileSelection("f1", "a\nb"))
    adapter.handle_text_change("a\nb\nc")

    assert mirrors[0].text == ""
    assert mirrors[-1].text == "a\nb\nc"
    assert mirrors[-1].line_numbers == (1, 2, 3)
    assert "opened f1" in statuses


def test_adapter_ignores_echoed_text() -> None:
    store = ProjectStore(None, seed_samples=False)
    project = store.create_project("Demo")
    file = store.create_file(project.id, "a.py", ProgrammingLanguage.PYTHON, "x")
    assert file is not None
    hooks = TextualUIHooks(update_buffer=lambda mirror: None)
    adapter = make_adapter(hooks, store=store)
    adapter.open(FileSelection.from_file(file))

    assert adapter.handle_text_change("x") is False
    assert adapter.handle_text_change("xy") is True
    assert file.content == "xy"


def test_adapter_shows_find_and_replace_results() -> None:
    shown: List[Sequence[SearchResult]] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        update_status=statuses.append,
        show_results=shown.append,
    )
    adapter = make_adapter(hooks)
    adapter.open(FileSelection("f1", "foo\nbar\nFOO"))

    adapter.handle_find("foo")
    adapter.handle_replace("foo", "baz")

    assert [r.line_number for r in shown[-2]] == [1, 3]
    assert [r.line_number for r in shown[-1]] == [3]
    assert "2 matching lines" in statuses
    assert statuses[-1] == "replaced 'foo' with 'baz'"


def test_adapter_format_and_snippet() -> None:
    mirrors: List[BufferMirror] = []
    hooks = TextualUIHooks(update_buffer=mirrors.append)
    adapter = make_adapter(hooks)
    adapter.open(FileSelection("f1", "f() {\nx\n}"))

    adapter.handle_format(2)
    adapter.handle_cursor(0)
    adapter.handle_snippet(
        CodeSnippet(title="c", code="// c\n", language=ProgrammingLanguage.JAVASCRIPT)
    )

    assert mirrors[-1].text == "// c\nf() {\n  x\n}"
    assert mirrors[-1].selection.offset == 5


def test_adapter_reports_missing_line() -> None:
    statuses: List[str] = []
    hooks = TextualUIHooks(update_buffer=lambda mirror: None, update_status=statuses.append)
    adapter = make_adapter(hooks)
    adapter.open(FileSelection("f1", "one"))

    assert adapter.handle_go_to_line(1) is True
    assert adapter.handle_go_to_line(9) is False
    assert statuses[-1] == "no line 9"


def test_adapter_emits_log_lines_and_events() -> None:
    logs: List[str] = []
    events: List[str] = []
    hooks = TextualUIHooks(
        update_buffer=lambda mirror: None,
        handle_event=lambda name, payload: events.append(name),
        log=logs.append,
    )
    adapter = make_adapter(hooks)

    adapter.open(FileSelection("f1", ""))
    adapter.handle_text_change("hello")
    adapter.close()

    assert events[:2] == ["session.open", "search.results"]
    assert "buffer.changed" in events
    assert events[-1] == "session.close"
    assert any(line.startswith("edit ->") for line in logs)


def test_adapter_ignores_line_ending_rewrite_from_widget_load() -> None:
    store = ProjectStore(None, seed_samples=False)
    project = store.create_project("Demo")
    file = store.create_file(project.id, "a.txt", ProgrammingLanguage.PYTHON, "a\r\nb\nc")
    assert file is not None
    hooks = TextualUIHooks(update_buffer=lambda mirror: None)
    adapter = make_adapter(hooks, store=store)
    adapter.open(FileSelection.from_file(file))

    adapter.note_host_load("a\r\nb\nc", "a\r\nb\r\nc")

    assert adapter.handle_text_change("a\r\nb\r\nc") is False
    assert file.content == "a\r\nb\nc"
    assert adapter.session.content == "a\r\nb\nc"
    assert adapter.needs_reload("a\r\nb\nc", "a\r\nb\r\nc") is False

    assert adapter.handle_text_change("a\r\nb\r\ncd") is True
    assert file.content == "a\r\nb\r\ncd"
    assert adapter.needs_reload("other", "a\r\nb\r\ncd") is True


def test_adapter_maps_widget_rows_through_splitlines() -> None:
    hooks = TextualUIHooks(update_buffer=lambda mirror: None)
    adapter = make_adapter(hooks)

    adapter.open(FileSelection("f1", "a\x0cb\nc"))
    assert adapter.handle_host_cursor(1, 1).offset == 3
    assert adapter.handle_host_cursor(2, 1).offset == 5

    adapter.open(FileSelection("f2", "a\r\nb\nc"))
    assert adapter.handle_host_cursor(2, 0).offset == 5
    assert adapter.handle_host_cursor(9, 9).offset == 6


def test_adapter_mirrors_never_carry_selection_past_end() -> None:
    mirrors: List[BufferMirror] = []
    hooks = TextualUIHooks(update_buffer=mirrors.append)
    adapter = make_adapter(hooks)
    adapter.open(FileSelection("f1", "long content"))
    adapter.handle_cursor(10)

    adapter.handle_text_change("ab")

    assert mirrors[-1].text == "ab"
    assert mirrors[-1].selection.offset == 2
    assert all(mirror.selection.end <= len(mirror.text) for mirror in mirrors)
