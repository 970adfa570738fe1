"""Shared pytest fixtures for epomo tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from epomo.timer.engine import PomodoroTimer

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """One offscreen QApplication for the whole run; Qt allows only one."""
    return QApplication.instance() or QApplication(sys.argv[:1])


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Point every test at a settings file under ``tmp_path``."""
    path = tmp_path / "epomo" / "settings.json"
    monkeypatch.setattr("epomo.settings.SETTINGS_PATH", path)
    yield path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timer(qapp, clock):
    """Fresh PomodoroTimer with default settings and a fake clock."""
    return PomodoroTimer(clock=clock)
