"""Environment-driven configuration for the editor and its stores."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

ENV_PREFIX = "NEOCODER_"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _default_data_dir() -> Path:
    return Path.home() / ".neocoder"


@dataclass(slots=True)
class EditorConfig:
    """Where the workspace stores live and whether to seed sample data."""

    data_dir: Path = field(default_factory=_default_data_dir)
    projects_file: str = "projects.json"
    settings_file: str = "settings.json"
    snippets_file: str = "snippets.json"
    seed_samples: bool = True

    @property
    def projects_path(self) -> Path:
        return self.data_dir / self.projects_file

    @property
    def settings_path(self) -> Path:
        return self.data_dir / self.settings_file

    @property
    def snippets_path(self) -> Path:
        return self.data_dir / self.snippets_file

    @classmethod
    def from_env(cls, *, data_dir: Optional[Path] = None) -> "EditorConfig":
        """Read ``NEOCODER_DATA_DIR`` and ``NEOCODER_SEED_SAMPLES``.

        An explicit ``data_dir`` wins over the environment.
        """

        if data_dir is None:
            raw = _env("DATA_DIR")
            data_dir = Path(raw).expanduser() if raw else _default_data_dir()
        return cls(data_dir=data_dir, seed_samples=_env_flag("SEED_SAMPLES", True))


__all__ = ["EditorConfig", "ENV_PREFIX"]
