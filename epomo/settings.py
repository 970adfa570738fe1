"""Persisted timer settings with JSON storage.

Settings are stored at ``<app dir>/settings.json`` where the app dir is:

    macOS     ~/Library/Application Support/epomo
    Windows   %APPDATA%\\epomo
    other     $XDG_CONFIG_HOME/epomo  (default ~/.config/epomo)

``EPOMO_CONFIG_DIR`` overrides the directory.

Usage::

    settings = load_settings()
    settings.work_minutes = 50
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)


def _default_app_dir() -> Path:
    override = os.environ.get("EPOMO_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "epomo"
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"]) / "epomo"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "epomo"


APP_SUPPORT_DIR = _default_app_dir()
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

# Inclusive bounds per field; ``None`` means unbounded above.
FIELD_RANGES: dict[str, tuple[int, int | None]] = {
    "work_minutes": (1, 120),
    "short_break_minutes": (1, 30),
    "long_break_minutes": (1, 120),
    "session_count": (0, None),
}


@dataclass
class Settings:
    """Everything that survives a restart.

    Mode and deadline are deliberately absent: a fresh launch is always
    idle in work mode.
    """

    work_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    session_count: int = 0


def _valid(name: str, value: object) -> bool:
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    low, high = FIELD_RANGES[name]
    return value >= low and (high is None or value <= high)


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Never raises.  Unknown keys are ignored; a field that is missing, of the
    wrong type or out of range keeps its default.
    """
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.info("No settings at %s, using defaults", SETTINGS_PATH)
        return Settings()
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Could not read %s (%s), using defaults", SETTINGS_PATH, exc)
        return Settings()

    if not isinstance(data, dict):
        logger.warning("Settings file %s is not an object, using defaults", SETTINGS_PATH)
        return Settings()

    accepted = {}
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        if _valid(f.name, value):
            accepted[f.name] = value
        else:
            logger.warning("Ignoring invalid %s=%r in settings", f.name, value)

    settings = Settings(**accepted)
    logger.info("Loaded settings from %s", SETTINGS_PATH)
    return settings


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
    logger.info("Saved settings to %s", SETTINGS_PATH)
