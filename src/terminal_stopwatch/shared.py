from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, PositiveInt
from textual.widget import Widget

class Lap(BaseModel):
    number: PositiveInt  # 1-based, chronological
    lap_duration: timedelta
    cumulative_duration: timedelta

    model_config = ConfigDict(
        frozen=True,
    )

class Snapshot(BaseModel):
    '''
    Everything the render step may read from a `TimerState`.  
    `selected_lap_index` indexes the newest-first view of `laps`.  
    '''
    elapsed: timedelta
    running: bool
    laps: tuple[Lap, ...]
    selected_lap_index: int | None

    model_config = ConfigDict(
        frozen=True,
    )

    def lapsNewestFirst(self) -> tuple[Lap, ...]:
        return self.laps[::-1]
    
    def selectedLap(self) -> Lap | None:
        if self.selected_lap_index is None:
            return None
        return self.lapsNewestFirst()[self.selected_lap_index]

def titled(
    w: Widget, /, title: str, skip_bottom: bool = False,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
