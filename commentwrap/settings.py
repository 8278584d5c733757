"""Persistent JSON user settings.

Stores the default wrap width and comment delimiter for the command line.
All access is defensive: malformed or missing settings fall back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "commentwrap"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON settings object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist settings as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    breaks wrapping.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_width() -> int | None:
    """Return the saved width, or ``None`` when unset or not a positive int."""
    value = load_config().get("width")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def save_width(width: int) -> None:
    if width <= 0:
        return
    config = load_config()
    config["width"] = int(width)
    save_config(config)


def load_delimiter() -> str | None:
    """Load the saved delimiter, returning ``None`` when unset/invalid."""
    value = load_config().get("delimiter")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_delimiter(delimiter: str) -> None:
    stripped = str(delimiter).strip()
    if not stripped:
        return
    config = load_config()
    config["delimiter"] = stripped
    save_config(config)
