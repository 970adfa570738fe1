"""Countdown display and Start/Stop controls.

Layout (top → bottom):
    - Start / Stop button row
    - Countdown label (``HH:MM:SS <mode>``, colored by mode)
    - Completed session counter
"""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
)

from ..timer.engine import PomodoroTimer, format_remaining
from .styles import mode_color


class TimerWidget(QWidget):
    """Start/Stop buttons plus the live countdown for a ``PomodoroTimer``."""

    def __init__(self, timer: PomodoroTimer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._timer = timer
        self._build_ui()
        self._connect_signals()
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(6)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(8)
        self._start_btn = QPushButton("Start", self)
        self._stop_btn = QPushButton("Stop", self)
        btn_row.addWidget(self._start_btn)
        btn_row.addWidget(self._stop_btn)
        btn_row.addStretch()
        root.addLayout(btn_row)

        self._countdown_label = QLabel("", self)
        self._countdown_label.setObjectName("countdown")
        root.addWidget(self._countdown_label)

        self._session_label = QLabel("", self)
        root.addWidget(self._session_label)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(self._on_start)
        self._stop_btn.clicked.connect(self._timer.stop)
        self._timer.running_changed.connect(lambda _running: self.refresh())
        self._timer.repaint_requested.connect(self.refresh)

    def _on_start(self) -> None:
        self._timer.start()

    # ── public ────────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Redraw from the timer's current state."""
        running = self._timer.is_running
        self._start_btn.setEnabled(not running)
        self._stop_btn.setEnabled(running)

        remaining = self._timer.remaining()
        if remaining is None:
            self._countdown_label.setVisible(False)
            self._session_label.setVisible(False)
            return

        mode = self._timer.mode
        self._countdown_label.setText(format_remaining(remaining, mode))
        self._countdown_label.setStyleSheet(f"color: {mode_color(mode)};")
        self._session_label.setText(
            f"Completed session count {self._timer.session_count}"
        )
        self._countdown_label.setVisible(True)
        self._session_label.setVisible(True)

    @property
    def countdown_text(self) -> str:
        return self._countdown_label.text()

    @property
    def session_text(self) -> str:
        return self._session_label.text()
