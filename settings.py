"""JSON-based configuration for the time changer (read-only)."""

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".time-changer-settings.json")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULTS = {
    "window_width": 500,
    "window_height": 500,
    "always_on_top": False,
    "log_level": "WARNING",
}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = dict(_DEFAULTS)
    path = path or _SETTINGS_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read %s, using defaults: %s", path, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring %s: top level is not an object", path)
        return settings
    for key in ("window_width", "window_height"):
        value = stored.get(key)
        # bool is an int subclass
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            settings[key] = value
    if isinstance(stored.get("always_on_top"), bool):
        settings["always_on_top"] = stored["always_on_top"]
    level = stored.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        settings["log_level"] = level.upper()
    return settings
