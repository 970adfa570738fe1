"""Shared test helpers for epomo."""

from datetime import datetime, timedelta, timezone

from epomo.timer.engine import PomodoroTimer


T0 = datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)


class SignalCollector:
    """Records every emission of the signals it is connected to.

    Single-argument emissions are stored bare, no-argument ones as None.
    """

    def __init__(self):
        self.items: list = []

    def __call__(self, *args):
        if len(args) == 1:
            self.items.append(args[0])
        else:
            self.items.append(args or None)

    def __len__(self):
        return len(self.items)

    @property
    def last(self):
        return self.items[-1] if self.items else None


class FakeClock:
    """Manually advanced clock; call it to read the current time."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


def finish_interval(timer: PomodoroTimer, clock: FakeClock) -> None:
    """Jump the clock one second past the deadline and poll once."""
    clock.now = timer.deadline + timedelta(seconds=1)
    assert timer.tick()
