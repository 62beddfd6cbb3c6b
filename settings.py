"""JSON-based settings for the shift calendar (edited by hand, read at start)."""

import json
import logging
import os

log = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".shift-calendar-settings.json")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULTS = {
    "dark_mode": False,
    "log_level": "WARNING",
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        log.warning("ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings

    if not isinstance(stored, dict):
        log.warning("ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings
    if "dark_mode" in stored and isinstance(stored["dark_mode"], bool):
        settings["dark_mode"] = stored["dark_mode"]
    level = stored.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        settings["log_level"] = level.upper()
    elif level is not None:
        log.warning("unknown log_level %r, using %s", level, _DEFAULTS["log_level"])
    return settings
