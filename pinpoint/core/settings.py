"""Persistent application settings helpers.

Besides the generic key/value helpers, this module owns the two feedback
preferences that survive between presentations of the feedback form:
whether the user opted into log collection and whether the screenshot is
attached.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pinpoint.logging import get_logger

logger = get_logger(__name__)


SETTINGS_DIR = Path.home() / ".config" / "pinpoint"
SETTINGS_PATH = SETTINGS_DIR / "settings.json"

LOG_COLLECTION_KEY = "user_enabled_log_collection"
INCLUDE_SCREENSHOT_KEY = "include_screenshot"


def load_settings() -> dict:
    """Load settings from disk.

    Returns an empty dict if the settings file does not exist or contains invalid JSON.
    """
    if not SETTINGS_PATH.exists():
        return {}

    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable settings file {SETTINGS_PATH}: {e}")
        return {}

    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Persist settings to disk atomically."""
    SETTINGS_DIR.mkdir(parents=True, exist_ok=True)
    tmp_path = SETTINGS_PATH.with_suffix(".tmp")
    tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
    tmp_path.replace(SETTINGS_PATH)


def get_setting(key: str, default: Any = None) -> Any:
    """Read a setting value with a fallback default."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> None:
    """Set and persist a single setting key."""
    settings = load_settings()
    settings[key] = value
    save_settings(settings)


@dataclass(frozen=True)
class FeedbackPreferences:
    """User choices carried from one feedback form to the next."""

    user_enabled_log_collection: bool = True
    include_screenshot: bool = True


def load_feedback_preferences() -> FeedbackPreferences:
    """Read feedback preferences, falling back to defaults for missing or non-bool values."""
    settings = load_settings()
    defaults = FeedbackPreferences()

    log_collection = settings.get(LOG_COLLECTION_KEY, defaults.user_enabled_log_collection)
    include_screenshot = settings.get(INCLUDE_SCREENSHOT_KEY, defaults.include_screenshot)

    return FeedbackPreferences(
        user_enabled_log_collection=(
            log_collection if isinstance(log_collection, bool)
            else defaults.user_enabled_log_collection
        ),
        include_screenshot=(
            include_screenshot if isinstance(include_screenshot, bool)
            else defaults.include_screenshot
        ),
    )


def save_feedback_preferences(preferences: FeedbackPreferences) -> None:
    """Merge feedback preferences into the settings file."""
    settings = load_settings()
    settings[LOG_COLLECTION_KEY] = preferences.user_enabled_log_collection
    settings[INCLUDE_SCREENSHOT_KEY] = preferences.include_screenshot
    save_settings(settings)
    logger.debug(f"Saved feedback preferences: {preferences}")
