"""Timer package."""

from .engine import (
    PomodoroTimer,
    PomodoroMode,
    MODE_LABELS,
    SESSIONS_PER_LONG_BREAK,
    format_remaining,
    next_mode,
    utc_now,
)

__all__ = [
    "PomodoroTimer",
    "PomodoroMode",
    "MODE_LABELS",
    "SESSIONS_PER_LONG_BREAK",
    "format_remaining",
    "next_mode",
    "utc_now",
]
