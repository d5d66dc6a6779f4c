from .UI import UI as StopwatchUI, main
from .clock import FakeClock
from .commands import Command, KEYMAP, apply
from .formatting import format_duration
from .shared import Lap, Snapshot
from .timer_state import TimerState

__all__ = [
    "StopwatchUI", "main", "FakeClock", "Command", "KEYMAP", "apply", 
    "format_duration", "Lap", "Snapshot", "TimerState", 
]
