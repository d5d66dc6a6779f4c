"""Shared fixtures: a manual clock and a timer bound to it."""

from __future__ import annotations

import pytest

from terminal_stopwatch import FakeClock, TimerState


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(start=1000.0)


@pytest.fixture
def state(clock: FakeClock) -> TimerState:
    return TimerState(clock)
