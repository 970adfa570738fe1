"""Tests for countdown formatting and mode presentation."""

from datetime import timedelta

import pytest

from epomo.timer.engine import PomodoroMode, MODE_LABELS, format_remaining
from epomo.ui.styles import MODE_COLORS, mode_color


class TestFormatRemaining:

    def test_ninety_seconds_work(self):
        assert format_remaining(timedelta(seconds=90), PomodoroMode.WORK) == "00:01:30 Work"

    def test_full_work_interval(self):
        assert format_remaining(timedelta(minutes=25), PomodoroMode.WORK) == "00:25:00 Work"

    def test_minutes_are_not_wrapped(self):
        """Minutes are total minutes, so an hour and five reads 65."""
        remaining = timedelta(hours=1, minutes=5, seconds=30)
        assert format_remaining(remaining, PomodoroMode.WORK) == "01:65:30 Work"

    def test_two_hours(self):
        assert format_remaining(timedelta(hours=2), PomodoroMode.LONG_BREAK) == "02:120:00 Long break"

    def test_sub_second_truncates(self):
        remaining = timedelta(seconds=59, milliseconds=999)
        assert format_remaining(remaining, PomodoroMode.SHORT_BREAK) == "00:00:59 Short break"

    def test_zero(self):
        assert format_remaining(timedelta(0), PomodoroMode.WORK) == "00:00:00 Work"

    def test_negative_truncates_toward_zero(self):
        assert format_remaining(timedelta(seconds=-1), PomodoroMode.WORK) == "00:00:-1 Work"
        assert format_remaining(timedelta(milliseconds=-500), PomodoroMode.WORK) == "00:00:00 Work"
        assert format_remaining(timedelta(seconds=-61), PomodoroMode.WORK) == "00:-1:-1 Work"

    @pytest.mark.parametrize("mode,label", [
        (PomodoroMode.WORK, "Work"),
        (PomodoroMode.SHORT_BREAK, "Short break"),
        (PomodoroMode.LONG_BREAK, "Long break"),
    ])
    def test_labels(self, mode, label):
        assert MODE_LABELS[mode] == label
        assert format_remaining(timedelta(seconds=5), mode).endswith(f" {label}")


class TestModeColors:

    def test_every_mode_has_a_color(self):
        assert set(MODE_COLORS) == set(PomodoroMode)

    def test_colors(self):
        assert mode_color(PomodoroMode.WORK) == "#3ABFF0"
        assert mode_color(PomodoroMode.SHORT_BREAK) == "#F0E73A"
        assert mode_color(PomodoroMode.LONG_BREAK) == "#F08C3A"
