"""UI package."""

from .timer_widget import TimerWidget
from .settings_panel import SettingsPanel
from .styles import MODE_COLORS, build_stylesheet, mode_color

__all__ = [
    "TimerWidget",
    "SettingsPanel",
    "MODE_COLORS",
    "build_stylesheet",
    "mode_color",
]
