"""Main application window for epomo."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel

from .settings import Settings, load_settings, save_settings
from .timer.engine import PomodoroTimer, Clock, utc_now
from .ui.settings_panel import SettingsPanel
from .ui.timer_widget import TimerWidget
from .ui.styles import build_stylesheet

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 1000


class EpomoApp(QMainWindow):
    """Main application window.

    Owns the single ``PomodoroTimer`` for the process and polls it once a
    second so the countdown stays live.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        clock: Clock = utc_now,
    ) -> None:
        super().__init__()
        self.setWindowTitle("epomo")
        self.setFixedSize(260, 300)

        # ── timer ─────────────────────────────────────────────────────
        if settings is None:
            settings = load_settings()
        self._timer = PomodoroTimer(settings, self, clock=clock)

        self.setStyleSheet(build_stylesheet())

        # ── central widget ────────────────────────────────────────────
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(8)

        heading = QLabel("Pomodoro", central)
        heading.setObjectName("heading")
        layout.addWidget(heading)

        self._settings_panel = SettingsPanel(self._timer, central)
        layout.addWidget(self._settings_panel)

        self._timer_widget = TimerWidget(self._timer, central)
        layout.addWidget(self._timer_widget)
        layout.addStretch()

        # ── wire signals ──────────────────────────────────────────────
        self._timer.running_changed.connect(self._on_running_changed)
        self._timer.mode_changed.connect(self._on_mode_changed)

        # ── poll loop ─────────────────────────────────────────────────
        self._poll_timer = QTimer(self)
        self._poll_timer.setInterval(POLL_INTERVAL_MS)
        self._poll_timer.timeout.connect(self.poll)
        self._poll_timer.start()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def timer(self) -> PomodoroTimer:
        return self._timer

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def settings_panel(self) -> SettingsPanel:
        return self._settings_panel

    def poll(self) -> None:
        """Advance the timer and redraw the countdown."""
        # A transition emits repaint_requested, which already redraws
        if not self._timer.tick():
            self._timer_widget.refresh()

    # ══════════════════════════════════════════════════════════════════
    #  TIMER SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_running_changed(self, _running: bool) -> None:
        self._settings_panel.refresh()

    def _on_mode_changed(self, _mode) -> None:
        self._settings_panel.refresh()

    # ══════════════════════════════════════════════════════════════════
    #  SHUTDOWN
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event: QCloseEvent) -> None:
        self._poll_timer.stop()
        try:
            save_settings(self._timer.to_settings())
        except OSError:
            logger.exception("Failed to save settings on exit")
        event.accept()
