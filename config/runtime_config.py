from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Final

DEFAULT_LOG_PATH: Final = Path(__file__).with_name("tilewalk.log")


def get_content_dir(default: Path) -> Path:
    d = os.getenv("TILEWALK_CONTENT_DIR")
    if d:
        return Path(d.strip())
    return default


def get_log_path() -> Path:
    p = os.getenv("TILEWALK_LOG_PATH")
    return Path(p.strip()) if p else DEFAULT_LOG_PATH


def _append(level: str, message: str) -> None:
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    entry = f"[{timestamp}] {level}: {message}\n"
    path = get_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(entry)
    except OSError:
        # A read-only checkout must still be playable.
        pass


def log_event(message: str) -> None:
    """Append a timestamped informational line to the shared log file."""

    _append("INFO", message)


def log_error(message: str) -> None:
    """Append a timestamped error line to the shared log file."""

    _append("ERROR", message)
