"""JSON-based settings persistence for the date picker.

Only presentation preferences are stored here; the selection never is.
"""

import json
import logging
import os

from selection import SelectionMode

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-date-picker-settings.json")

_DEFAULTS = {
    "selection_mode": SelectionMode.RANGE.value,
    "window_width": None,
    "window_height": None,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings
    if stored.get("selection_mode") in {m.value for m in SelectionMode}:
        settings["selection_mode"] = stored["selection_mode"]
    for key in ("window_width", "window_height"):
        value = stored.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            settings[key] = value
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def update_settings(**changes) -> bool:
    """Merge *changes* into the stored settings.

    Returns False (after logging a warning) when the file cannot be written.
    """
    settings = load_settings()
    settings.update(changes)
    try:
        save_settings(settings)
    except OSError as exc:
        logger.warning("Could not save settings to %s: %s", _SETTINGS_PATH, exc)
        return False
    return True


def selection_mode(settings: dict) -> SelectionMode:
    return SelectionMode(settings["selection_mode"])
