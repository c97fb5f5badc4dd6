"""Snippet library persisted as a JSON list."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from neocoder.runtime import telemetry

from ._storage import read_json, write_json
from .models import CodeSnippet, ProgrammingLanguage


def default_snippets() -> List[CodeSnippet]:
    return [
        CodeSnippet(
            title="For Loop",
            code="for i in 0..<10 {\n    print(i)\n}",
            language=ProgrammingLanguage.SWIFT,
            category="Loops",
        ),
        CodeSnippet(
            title="Function Template",
            code=(
                "func functionName(parameter: Type) -> ReturnType {\n"
                "    // Implementation\n"
                "    return value\n"
                "}"
            ),
            language=ProgrammingLanguage.SWIFT,
            category="Functions",
        ),
        CodeSnippet(
            title="JavaScript Function",
            code=(
                "function functionName(param) {\n"
                "    // Implementation\n"
                "    return result;\n"
                "}"
            ),
            language=ProgrammingLanguage.JAVASCRIPT,
            category="Functions",
        ),
        CodeSnippet(
            title="Python Class",
            code=(
                "class ClassName:\n"
                "    def __init__(self, param):\n"
                "        self.param = param\n"
                "\n"
                "    def method(self):\n"
                "        pass"
            ),
            language=ProgrammingLanguage.PYTHON,
            category="Classes",
        ),
        CodeSnippet(
            title="HTML Template",
            code=(
                "<!DOCTYPE html>\n"
                '<html lang="en">\n'
                "<head>\n"
                '    <meta charset="UTF-8">\n'
                "    <title>Document</title>\n"
                "</head>\n"
                "<body>\n"
                "</body>\n"
                "</html>"
            ),
            language=ProgrammingLanguage.HTML,
            category="Templates",
        ),
    ]


class SnippetLibrary:
    def __init__(self, path: Optional[Path] = None, *, seed_defaults: bool = True) -> None:
        self.path = path
        self.snippets: List[CodeSnippet] = []
        self.load()
        if not self.snippets and seed_defaults:
            self.snippets = default_snippets()
            self.save()

    def load(self) -> None:
        raw = read_json(self.path)
        if not isinstance(raw, list):
            return
        try:
            self.snippets = [CodeSnippet.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            telemetry.record_event(
                "snippets.decode_failed",
                level="warning",
                data={"path": str(self.path), "error": str(exc)},
            )

    def save(self) -> bool:
        return write_json(self.path, [snippet.to_dict() for snippet in self.snippets])

    def get(self, snippet_id: str) -> Optional[CodeSnippet]:
        return next((s for s in self.snippets if s.id == snippet_id), None)

    def create_snippet(
        self,
        title: str,
        code: str,
        language: ProgrammingLanguage,
        category: str = "General",
    ) -> CodeSnippet:
        snippet = CodeSnippet(title=title, code=code, language=language, category=category)
        self.snippets.append(snippet)
        self.save()
        return snippet

    def delete_snippet(self, snippet_id: str) -> bool:
        snippet = self.get(snippet_id)
        if snippet is None:
            return False
        self.snippets.remove(snippet)
        self.save()
        return True

    def categories(self) -> List[str]:
        return sorted({snippet.category for snippet in self.snippets})

    def filter(
        self,
        *,
        category: Optional[str] = None,
        language: Optional[ProgrammingLanguage] = None,
        text: str = "",
    ) -> List[CodeSnippet]:
        """Snippets matching every given criterion; ``text`` searches titles."""

        needle = text.casefold()
        return [
            snippet
            for snippet in self.snippets
            if (category is None or snippet.category == category)
            and (language is None or snippet.language == language)
            and needle in snippet.title.casefold()
        ]


__all__ = ["SnippetLibrary", "default_snippets"]
