"""Executable Textual app that hosts the editing engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Input, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use neocoder.adapters.textual.app"
    ) from exc

from neocoder.actions.search import SearchResult
from neocoder.buffer import BufferMirror
from neocoder.config import EditorConfig
from neocoder.session import EditorSession, FileSelection
from neocoder.workspace import ProjectStore, SettingsStore, SnippetLibrary

from .controller import TextualEditorAdapter, TextualUIHooks


@dataclass
class UIState:
    status_text: str = ""
    result_lines: tuple[str, ...] = ()


class NeoCoderApp(App[None]):
    """Single-file editor with find/replace, go-to-line, and snippets."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor-area {
		height: 1fr;
	}

	#line-numbers {
		width: 6;
		padding: 1 1 0 0;
		color: $text-muted;
		text-align: right;
	}

	#editor {
		width: 1fr;
	}

	.tool-row {
		height: 3;
	}

	.tool-row Input {
		width: 1fr;
	}

	#results {
		height: 5;
		overflow: auto;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+f", "focus_find", "Find"),
        ("ctrl+l", "format", "Format"),
        ("ctrl+g", "focus_goto", "Go to line"),
    ]

    def __init__(self, *, config: EditorConfig, file_name: Optional[str] = None) -> None:
        super().__init__()
        self.config = config
        self._file_name = file_name
        self._state = UIState()
        self.projects = ProjectStore(config.projects_path, seed_samples=config.seed_samples)
        self.settings = SettingsStore(config.settings_path)
        self.snippets = SnippetLibrary(
            config.snippets_path, seed_defaults=config.seed_samples
        )
        self.session = EditorSession(sink=self.projects, settings=self.settings)
        self.adapter: TextualEditorAdapter | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="editor-area"):
            yield Static("", id="line-numbers")
            yield TextArea("", id="editor")
        with Horizontal(classes="tool-row"):
            yield Input(placeholder="Find", id="find-input")
            yield Input(placeholder="Replace all with", id="replace-input")
        with Horizontal(classes="tool-row"):
            yield Input(placeholder="Go to line", id="goto-input")
            yield Input(placeholder="Insert snippet by title", id="snippet-input")
        yield Static("", id="results")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#line-numbers", Static).display = self.settings.show_line_numbers
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_results=self._show_results,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        selection = self._initial_selection()
        if selection is None:
            self._update_status("no file open")
        else:
            self.adapter.open(selection)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter:
            self.adapter.handle_text_change(event.text_area.text)

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if not self.adapter:
            return
        row, col = event.selection.end
        self.adapter.handle_host_cursor(row, col)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        input_id = event.input.id
        if input_id == "find-input":
            self.adapter.handle_find(event.value)
        elif input_id == "replace-input":
            query = self.query_one("#find-input", Input).value
            self.adapter.handle_replace(query, event.value)
        elif input_id == "goto-input":
            self._go_to_line(event.value)
        elif input_id == "snippet-input":
            self._insert_snippet(event.value)

    def action_focus_find(self) -> None:
        self.query_one("#find-input", Input).focus()

    def action_focus_goto(self) -> None:
        self.query_one("#goto-input", Input).focus()

    def action_format(self) -> None:
        if self.adapter:
            self.adapter.handle_format()

    def _initial_selection(self) -> Optional[FileSelection]:
        project = self.projects.current_project
        if project is None or not project.files:
            return None
        file = project.files[0]
        if self._file_name:
            file = next((f for f in project.files if f.name == self._file_name), file)
        self.title = project.name
        self.sub_title = file.name
        return FileSelection.from_file(file)

    def _go_to_line(self, raw: str) -> None:
        try:
            line_number = int(raw.strip())
        except ValueError:
            self._update_status(f"not a line number: {raw!r}")
            return
        if self.adapter and self.adapter.handle_go_to_line(line_number):
            self.query_one("#editor", TextArea).move_cursor((line_number - 1, 0))

    def _insert_snippet(self, title: str) -> None:
        matches = self.snippets.filter(text=title.strip())
        if not matches:
            self._update_status(f"no snippet matching {title!r}")
            return
        if self.adapter:
            self.adapter.handle_snippet(matches[0])
            self._update_status(f"inserted {matches[0].title}")

    def _update_buffer(self, mirror: BufferMirror) -> None:
        editor = self.query_one("#editor", TextArea)
        if self.adapter is None:
            if editor.text != mirror.text:
                editor.load_text(mirror.text)
        elif self.adapter.needs_reload(mirror.text, editor.text):
            editor.load_text(mirror.text)
            self.adapter.note_host_load(mirror.text, editor.text)
        numbers = "\n".join(str(number) for number in mirror.line_numbers)
        self.query_one("#line-numbers", Static).update(numbers)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        self.query_one("#status-line", Static).update(status)

    def _show_results(self, results: Sequence[SearchResult]) -> None:
        self._state.result_lines = tuple(
            f"{result.line_number:>5}: {result.line_text}" for result in results
        )
        self.query_one("#results", Static).update("\n".join(self._state.result_lines))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the NeoCoder Textual editor.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding projects, settings, and snippets "
        "(default: $NEOCODER_DATA_DIR or ~/.neocoder)",
    )
    parser.add_argument(
        "--file",
        dest="file_name",
        default=None,
        help="Name of the file to open from the current project",
    )
    parser.add_argument(
        "--no-samples",
        action="store_true",
        help="Do not seed the sample project and default snippets",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    config = EditorConfig.from_env(data_dir=args.data_dir)
    if args.no_samples:
        config.seed_samples = False
    NeoCoderApp(config=config, file_name=args.file_name).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
