"""Shared pytest fixtures for Hourglass tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from hourglass.timer.engine import TimerEngine

from helpers import VirtualTickSource


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def clock():
    """Virtual tick source; advance it with ``clock.tick(seconds)``."""
    return VirtualTickSource()


@pytest.fixture
def engine(qapp, clock):
    """Fresh TimerEngine driven by the virtual clock."""
    timer = TimerEngine(parent=None, tick_source=clock)
    yield timer
    timer.stop()
