"""Pomodoro state machine for epomo.

Modes
-----
WORK          Work interval counting down.
SHORT_BREAK   Short break counting down.
LONG_BREAK    Long break counting down (every 4th completed work interval).

The timer is either idle (``deadline is None``) or running.  While idle the
mode is kept but inert; ``start()`` resumes with whatever mode is current.

Transitions
-----------
idle → running                      (start)
running → idle                      (stop, which also zeroes the session count)
WORK → SHORT_BREAK | LONG_BREAK     (deadline passed, see ``next_mode``)
SHORT_BREAK | LONG_BREAK → WORK     (deadline passed)

The timer never reads the clock on its own schedule: the host polls
``tick()`` at least once a second and redraws from ``remaining()``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from ..settings import Settings

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class PomodoroMode(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


# ── constants ─────────────────────────────────────────────────────────────

MODE_LABELS: dict[PomodoroMode, str] = {
    PomodoroMode.WORK: "Work",
    PomodoroMode.SHORT_BREAK: "Short break",
    PomodoroMode.LONG_BREAK: "Long break",
}

SESSIONS_PER_LONG_BREAK = 4

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ── pure helpers ──────────────────────────────────────────────────────────


def next_mode(mode: PomodoroMode, session_count: int) -> PomodoroMode:
    """Mode that follows *mode* once its interval has elapsed.

    *session_count* must already include the work interval that just
    finished.
    """
    if mode == PomodoroMode.WORK:
        if session_count % SESSIONS_PER_LONG_BREAK == 0:
            return PomodoroMode.LONG_BREAK
        return PomodoroMode.SHORT_BREAK
    return PomodoroMode.WORK


def _trunc_div(value: int, unit: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(value) // unit
    return -q if value < 0 else q


def format_remaining(remaining: timedelta, mode: PomodoroMode) -> str:
    """Render *remaining* as ``HH:MM:SS <label>``.

    Hours and minutes are totals, not wrapped to their unit, so 3930 s reads
    ``01:65:30``.  Only seconds are reduced modulo 60.  All components
    truncate toward zero, so a slightly negative duration renders with a
    leading minus on the seconds field.
    """
    total_us = (
        remaining.days * 86_400_000_000
        + remaining.seconds * 1_000_000
        + remaining.microseconds
    )
    total_seconds = _trunc_div(total_us, 1_000_000)
    hours = _trunc_div(total_seconds, 3600)
    minutes = _trunc_div(total_seconds, 60)
    seconds = total_seconds - _trunc_div(total_seconds, 60) * 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d} {MODE_LABELS[mode]}"


# ── timer ─────────────────────────────────────────────────────────────────


class PomodoroTimer(QObject):
    """Deadline-based Pomodoro timer polled by the host UI.

    Signals
    -------
    repaint_requested()
        Emitted right after a mode transition so the new countdown is drawn
        without waiting for the next poll.
    mode_changed(mode: PomodoroMode)
        Emitted on every mode transition.
    running_changed(running: bool)
        Emitted on ``start()`` and ``stop()``.
    """

    repaint_requested = pyqtSignal()
    mode_changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)

    def __init__(
        self,
        settings: Settings | None = None,
        parent: QObject | None = None,
        *,
        clock: Clock = utc_now,
    ) -> None:
        super().__init__(parent)
        self._clock = clock

        # ── configuration ─────────────────────────────────────────────
        self._minutes: dict[PomodoroMode, int] = {}

        # ── cycle state ───────────────────────────────────────────────
        self._mode: PomodoroMode = PomodoroMode.WORK
        self._deadline: datetime | None = None
        self._session_count: int = 0

        self.apply_settings(settings or Settings())

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> PomodoroMode:
        return self._mode

    @property
    def deadline(self) -> datetime | None:
        """When the current interval ends; ``None`` while idle."""
        return self._deadline

    @property
    def session_count(self) -> int:
        """Completed work intervals since the last stop."""
        return self._session_count

    @property
    def is_running(self) -> bool:
        return self._deadline is not None

    def minutes_for(self, mode: PomodoroMode) -> int:
        return self._minutes[mode]

    def duration_for(self, mode: PomodoroMode) -> timedelta:
        return timedelta(minutes=self._minutes[mode])

    def remaining(self, now: datetime | None = None) -> timedelta | None:
        """Signed time left in the current interval, ``None`` while idle."""
        if self._deadline is None:
            return None
        if now is None:
            now = self._clock()
        return self._deadline - now

    # ══════════════════════════════════════════════════════════════════
    #  SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def is_editable(self, mode: PomodoroMode) -> bool:
        """Whether the duration for *mode* may be changed right now.

        The work duration is locked for as long as the timer runs; a break
        duration only while that break is counting down.
        """
        if not self.is_running:
            return True
        if mode == PomodoroMode.WORK:
            return False
        return self._mode != mode

    def edit_setting(self, mode: PomodoroMode, minutes: int) -> bool:
        """Change the duration for *mode*.  Returns False when locked."""
        if not self.is_editable(mode):
            logger.debug("Ignoring edit of %s while it is locked", mode.value)
            return False
        self._minutes[mode] = minutes
        return True

    def apply_settings(self, settings: Settings) -> None:
        """Load durations and session count from a persisted record.

        Mode and deadline are runtime-only and are never restored.
        """
        self._minutes = {
            PomodoroMode.WORK: settings.work_minutes,
            PomodoroMode.SHORT_BREAK: settings.short_break_minutes,
            PomodoroMode.LONG_BREAK: settings.long_break_minutes,
        }
        self._session_count = settings.session_count

    def to_settings(self) -> Settings:
        return Settings(
            work_minutes=self._minutes[PomodoroMode.WORK],
            short_break_minutes=self._minutes[PomodoroMode.SHORT_BREAK],
            long_break_minutes=self._minutes[PomodoroMode.LONG_BREAK],
            session_count=self._session_count,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self, now: datetime | None = None) -> None:
        """Start counting down the current mode.  Only valid while idle."""
        if self.is_running:
            return
        if now is None:
            now = self._clock()
        self._deadline = now + self.duration_for(self._mode)
        logger.info(
            "Started %s, ends at %s", self._mode.value, self._deadline.isoformat()
        )
        self.running_changed.emit(True)

    def stop(self) -> None:
        """Stop the countdown and discard progress.  Only valid while running."""
        if not self.is_running:
            return
        self._deadline = None
        self._session_count = 0
        logger.info("Stopped; session count reset")
        self.running_changed.emit(False)

    def tick(self, now: datetime | None = None) -> bool:
        """Advance the state machine to *now*.

        Returns True when the current interval had elapsed and the timer
        moved on to the next mode.  Exactly zero remaining is not elapsed.
        """
        if self._deadline is None:
            return False
        if now is None:
            now = self._clock()
        if self._deadline - now >= timedelta(0):
            return False

        finished = self._mode
        if finished == PomodoroMode.WORK:
            self._session_count += 1
        self._mode = next_mode(finished, self._session_count)
        self._deadline = now + self.duration_for(self._mode)

        logger.info(
            "%s finished (sessions=%d), now %s",
            MODE_LABELS[finished],
            self._session_count,
            MODE_LABELS[self._mode],
        )
        self.mode_changed.emit(self._mode)
        self.repaint_requested.emit()
        return True
