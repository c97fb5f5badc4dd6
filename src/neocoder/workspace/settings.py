"""User settings and their JSON-backed key-value store."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from neocoder.actions.formatting import clamp_tab_size
from neocoder.runtime import telemetry

from ._storage import read_json, write_json

MIN_FONT_SIZE = 10.0
MAX_FONT_SIZE = 24.0


class AppTheme(str, Enum):
    LIGHT = "Light"
    DARK = "Dark"
    SYSTEM = "System"


def clamp_font_size(size: float) -> float:
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, float(size)))


@dataclass
class UserSettings:
    theme: AppTheme = AppTheme.DARK
    font_size: float = 14.0
    show_line_numbers: bool = True
    auto_indent: bool = True
    word_wrap: bool = False
    tab_size: int = 4
    enable_collaboration: bool = True
    has_completed_onboarding: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["theme"] = self.theme.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserSettings":
        """Decode stored settings, ignoring unknown keys and clamping ranges."""

        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        settings = cls(**values)
        settings.theme = AppTheme(settings.theme)
        settings.font_size = clamp_font_size(settings.font_size)
        settings.tab_size = clamp_tab_size(int(settings.tab_size))
        return settings


class SettingsStore:
    """Holds the active ``UserSettings`` and saves after every update."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path
        self.settings = self._load()

    @property
    def tab_size(self) -> int:
        return self.settings.tab_size

    @property
    def show_line_numbers(self) -> bool:
        return self.settings.show_line_numbers

    def save(self) -> bool:
        return write_json(self.path, self.settings.to_dict())

    def update_theme(self, theme: AppTheme) -> None:
        self.settings.theme = AppTheme(theme)
        self.save()

    def update_font_size(self, size: float) -> None:
        self.settings.font_size = clamp_font_size(size)
        self.save()

    def update_tab_size(self, size: int) -> None:
        self.settings.tab_size = clamp_tab_size(size)
        self.save()

    def toggle_line_numbers(self) -> None:
        self.settings.show_line_numbers = not self.settings.show_line_numbers
        self.save()

    def toggle_auto_indent(self) -> None:
        self.settings.auto_indent = not self.settings.auto_indent
        self.save()

    def toggle_word_wrap(self) -> None:
        self.settings.word_wrap = not self.settings.word_wrap
        self.save()

    def toggle_collaboration(self) -> None:
        self.settings.enable_collaboration = not self.settings.enable_collaboration
        self.save()

    def complete_onboarding(self) -> None:
        self.settings.has_completed_onboarding = True
        self.save()

    def reset(self) -> None:
        self.settings = UserSettings()
        self.save()

    def _load(self) -> UserSettings:
        raw = read_json(self.path)
        if isinstance(raw, dict):
            try:
                return UserSettings.from_dict(raw)
            except (TypeError, ValueError) as exc:
                telemetry.record_event(
                    "settings.decode_failed",
                    level="warning",
                    data={"path": str(self.path), "error": str(exc)},
                )
        settings = UserSettings()
        self.settings = settings
        self.save()
        return settings


__all__ = [
    "AppTheme",
    "UserSettings",
    "SettingsStore",
    "clamp_font_size",
    "MIN_FONT_SIZE",
    "MAX_FONT_SIZE",
]
