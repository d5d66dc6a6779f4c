"""Tests for UI.py: the interaction loop driven headless through a Pilot."""

from __future__ import annotations

from datetime import timedelta

import pytest
from textual.widgets import Static

from terminal_stopwatch import FakeClock, StopwatchUI
import terminal_stopwatch.UI as ui_module
from terminal_stopwatch.UI import LapList


@pytest.fixture
def app(clock: FakeClock) -> StopwatchUI:
    return StopwatchUI(clock=clock, poll_interval=0.01)


def _text(app: StopwatchUI, selector: str) -> str:
    return str(app.query_one(selector, Static).render())


@pytest.mark.asyncio
async def test_keys_drive_the_timer(app, clock):
    async with app.run_test() as pilot:
        clock.advance(5)
        await pilot.press("space")
        clock.advance(3)
        await pilot.press("p")
        assert not app.state.running
        clock.advance(10)
        await pilot.press("p")
        await pilot.press("space")

        laps = app.state.laps
        assert [lap.cumulative_duration for lap in laps] == [
            timedelta(seconds=5),
            timedelta(seconds=8),
        ]
        assert laps[1].lap_duration == timedelta(seconds=3)


@pytest.mark.asyncio
async def test_navigation_and_reset(app, clock):
    async with app.run_test() as pilot:
        for _ in range(3):
            clock.advance(1)
            await pilot.press("space")
        await pilot.press("up")
        assert app.state.selected_lap_index == 2
        await pilot.press("down")
        assert app.state.selected_lap_index == 0
        await pilot.press("r")
        assert app.state.laps == []
        assert app.state.selected_lap_index is None


@pytest.mark.asyncio
async def test_unmapped_keys_are_ignored(app, clock):
    async with app.run_test() as pilot:
        clock.advance(1)
        await pilot.press("x", "enter", "left")
        assert app.state.running
        assert app.state.laps == []


@pytest.mark.asyncio
async def test_display_follows_state(app, clock):
    async with app.run_test() as pilot:
        clock.advance(12.34)
        await pilot.pause(0.05)
        assert "12.34s" in _text(app, "#timer")
        assert "P: Pause" in _text(app, "#controls")

        await pilot.press("p")
        assert "P: Resume" in _text(app, "#controls")

        await pilot.press("space")
        lap_list = app.query_one("#laps", LapList)
        assert lap_list.snapshot is not None
        assert len(lap_list.snapshot.laps) == 1
        assert lap_list.border_title == "Laps (1) - Use ↑↓ to scroll"


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["q", "escape"])
async def test_quit_exits_cleanly(app, key):
    async with app.run_test() as pilot:
        await pilot.press(key)
    assert app.return_code == 0


@pytest.mark.asyncio
async def test_lap_list_subtitle_follows_selection(app, clock):
    async with app.run_test() as pilot:
        for _ in range(3):
            clock.advance(1)
            await pilot.press("space")
        lap_list = app.query_one("#laps", LapList)
        assert lap_list.border_subtitle == "Lap 3 of 3"
        await pilot.press("up")
        assert lap_list.border_subtitle == "Lap 1 of 3"


class TestMain:
    @pytest.fixture(autouse=True)
    def _no_terminal(self, monkeypatch):
        monkeypatch.setattr(ui_module.logging, "basicConfig", lambda **kw: None)
        monkeypatch.setattr(ui_module.UI, "run", lambda self: None)

    @pytest.mark.parametrize("return_code, exit_code", [(None, 0), (0, 0), (1, 1)])
    def test_exit_code_follows_the_app(self, monkeypatch, return_code, exit_code):
        monkeypatch.setattr(
            ui_module.UI, "return_code", property(lambda self: return_code)
        )
        with pytest.raises(SystemExit) as excinfo:
            ui_module.main()
        assert excinfo.value.code == exit_code
