"""Read-only JSON config helpers.

Holds the preferred UI theme and an optional debug log path. Access is
defensive: a malformed or missing config falls back to defaults. The viewer
never writes the config and keeps no state in it between runs.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "logbrowser"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def load_log_file() -> Path | None:
    """Load configured debug log path, with ``~`` expanded."""
    value = _load_string("log_file")
    if value is None:
        return None
    return Path(value).expanduser()
