"""Duration sliders for the three Pomodoro modes.

Each slider writes straight through to the timer.  A slider is disabled
while the timer reports its duration as locked, so the countdown in
progress never has its length changed underneath it.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSlider,
)

from ..timer.engine import PomodoroTimer, PomodoroMode


# (caption, minimum, maximum) per mode
SLIDER_SPECS: dict[PomodoroMode, tuple[str, int, int]] = {
    PomodoroMode.WORK:        ("Interval time in minutes", 1, 120),
    PomodoroMode.SHORT_BREAK: ("Short break time in minutes", 1, 30),
    PomodoroMode.LONG_BREAK:  ("Long break time in minutes", 1, 120),
}


class SettingsPanel(QWidget):
    """Three labelled sliders bound to a ``PomodoroTimer``."""

    def __init__(self, timer: PomodoroTimer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._timer = timer
        self._sliders: dict[PomodoroMode, QSlider] = {}
        self._value_labels: dict[PomodoroMode, QLabel] = {}
        self._build_ui()
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(6)

        for mode, (caption, low, high) in SLIDER_SPECS.items():
            label = QLabel(caption, self)
            label.setObjectName("caption")
            root.addWidget(label)

            row = QHBoxLayout()
            row.setSpacing(8)

            slider = QSlider(Qt.Orientation.Horizontal, self)
            slider.setRange(low, high)
            slider.setValue(self._timer.minutes_for(mode))
            slider.valueChanged.connect(
                lambda value, m=mode: self._on_value_changed(m, value)
            )

            value_label = QLabel(f"{slider.value()}m", self)
            value_label.setMinimumWidth(40)
            value_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )

            row.addWidget(slider, 1)
            row.addWidget(value_label)
            root.addLayout(row)

            self._sliders[mode] = slider
            self._value_labels[mode] = value_label

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_value_changed(self, mode: PomodoroMode, value: int) -> None:
        if not self._timer.edit_setting(mode, value):
            # Locked: snap back to what the timer is actually using
            self._set_slider(mode, self._timer.minutes_for(mode))
            return
        self._value_labels[mode].setText(f"{value}m")

    def _set_slider(self, mode: PomodoroMode, value: int) -> None:
        slider = self._sliders[mode]
        slider.blockSignals(True)
        slider.setValue(value)
        slider.blockSignals(False)
        self._value_labels[mode].setText(f"{value}m")

    # ── public ────────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Sync slider values and enabled state with the timer."""
        for mode, slider in self._sliders.items():
            self._set_slider(mode, self._timer.minutes_for(mode))
            slider.setEnabled(self._timer.is_editable(mode))

    def slider(self, mode: PomodoroMode) -> QSlider:
        return self._sliders[mode]
