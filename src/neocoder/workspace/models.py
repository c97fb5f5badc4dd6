"""Projects, files, and snippets as stored by the workspace."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class ProgrammingLanguage(str, Enum):
    SWIFT = "Swift"
    JAVASCRIPT = "JavaScript"
    PYTHON = "Python"
    JAVA = "Java"
    CPP = "C++"
    HTML = "HTML"
    CSS = "CSS"
    JSON = "JSON"
    XML = "XML"
    MARKDOWN = "Markdown"

    @property
    def file_extension(self) -> str:
        return _EXTENSIONS[self]

    @classmethod
    def for_filename(cls, name: str) -> Optional["ProgrammingLanguage"]:
        lowered = name.lower()
        for language, extension in _EXTENSIONS.items():
            if lowered.endswith(extension):
                return language
        return None


_EXTENSIONS: Dict[ProgrammingLanguage, str] = {
    ProgrammingLanguage.SWIFT: ".swift",
    ProgrammingLanguage.JAVASCRIPT: ".js",
    ProgrammingLanguage.PYTHON: ".py",
    ProgrammingLanguage.JAVA: ".java",
    ProgrammingLanguage.CPP: ".cpp",
    ProgrammingLanguage.HTML: ".html",
    ProgrammingLanguage.CSS: ".css",
    ProgrammingLanguage.JSON: ".json",
    ProgrammingLanguage.XML: ".xml",
    ProgrammingLanguage.MARKDOWN: ".md",
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def _parse_time(value: Any) -> datetime:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return utcnow()


@dataclass
class CodeFile:
    name: str
    content: str = ""
    language: ProgrammingLanguage = ProgrammingLanguage.SWIFT
    id: str = field(default_factory=new_id)
    last_modified: datetime = field(default_factory=utcnow)
    breakpoints: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "content": self.content,
            "language": self.language.value,
            "last_modified": self.last_modified.isoformat(),
            "breakpoints": list(self.breakpoints),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CodeFile":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            content=str(data.get("content", "")),
            language=ProgrammingLanguage(data.get("language", "Swift")),
            last_modified=_parse_time(data.get("last_modified")),
            breakpoints=[int(line) for line in data.get("breakpoints", [])],
        )


@dataclass
class CodeProject:
    name: str
    files: List[CodeFile] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created_date: datetime = field(default_factory=utcnow)
    last_modified: datetime = field(default_factory=utcnow)

    def find_file(self, file_id: str) -> Optional[CodeFile]:
        return next((file for file in self.files if file.id == file_id), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "files": [file.to_dict() for file in self.files],
            "created_date": self.created_date.isoformat(),
            "last_modified": self.last_modified.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CodeProject":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            files=[CodeFile.from_dict(item) for item in data.get("files", [])],
            created_date=_parse_time(data.get("created_date")),
            last_modified=_parse_time(data.get("last_modified")),
        )


@dataclass
class CodeSnippet:
    title: str
    code: str
    language: ProgrammingLanguage
    category: str = "General"
    id: str = field(default_factory=new_id)
    created_date: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "code": self.code,
            "language": self.language.value,
            "category": self.category,
            "created_date": self.created_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CodeSnippet":
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            code=str(data["code"]),
            language=ProgrammingLanguage(data["language"]),
            category=str(data.get("category", "General")),
            created_date=_parse_time(data.get("created_date")),
        )


__all__ = [
    "ProgrammingLanguage",
    "CodeFile",
    "CodeProject",
    "CodeSnippet",
    "utcnow",
    "new_id",
]
