"""JSON file helpers used by the workspace stores."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from neocoder.runtime import telemetry


def read_json(path: Optional[Path]) -> Optional[Any]:
    """Return the decoded file, or ``None`` when absent or unreadable."""

    if path is None:
        return None
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as exc:
        telemetry.record_event(
            "storage.read_failed",
            level="warning",
            data={"path": str(path), "error": str(exc)},
        )
        return None


def write_json(path: Optional[Path], payload: Any) -> bool:
    """Atomically replace ``path`` with ``payload``; ``False`` if it failed."""

    if path is None:
        return False
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
        os.replace(tmp, path)
    except OSError as exc:
        telemetry.record_event(
            "storage.write_failed",
            level="warning",
            data={"path": str(path), "error": str(exc)},
        )
        return False
    return True
