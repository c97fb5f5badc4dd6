"""Workspace collaborators: projects, settings, and the snippet library."""

from .models import CodeFile, CodeProject, CodeSnippet, ProgrammingLanguage
from .projects import ProjectStore
from .settings import AppTheme, SettingsStore, UserSettings
from .snippets import SnippetLibrary, default_snippets

__all__ = [
    "CodeFile",
    "CodeProject",
    "CodeSnippet",
    "ProgrammingLanguage",
    "ProjectStore",
    "AppTheme",
    "SettingsStore",
    "UserSettings",
    "SnippetLibrary",
    "default_snippets",
]
