"""Shared fixtures for calendartm tests."""

import logging
import pytest

from calendartm.models import Calendar
from calendartm.registry import add_task


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config lookup at a file that does not exist."""
    monkeypatch.setenv("CALENDARTM_CONFIG", str(tmp_path / "missing-config.yml"))


@pytest.fixture
def package_logs(monkeypatch):
    """Let caplog see records of the calendartm logger, which does not propagate."""
    monkeypatch.setattr(logging.getLogger("calendartm"), "propagate", True)


@pytest.fixture
def calendar():
    return Calendar()


@pytest.fixture
def holiday_calendar():
    """Calendar with two tasks on Christmas 2025 and one on New Year 2026."""
    cal = Calendar()
    add_task(cal, 2025, 12, 25, "Christmas Day", notify=False)
    add_task(cal, 2025, 12, 25, "Dinner at 6", notify=False)
    add_task(cal, 2026, 1, 1, "New Year's Day", notify=False)
    return cal
