'''
Pure projections of a `Snapshot` into Rich console markup.  
Widgets in `UI.py` only place these strings on screen.  
'''

from .formatting import format_duration, timer_color
from .shared import Lap, Snapshot

TITLE = '⏱️  STOPWATCH'
EMPTY_LAPS_HINT = 'Press SPACE to record your first lap!'
SEPARATOR = '  •  '

def renderTimer(snapshot: Snapshot) -> str:
    # The indicator shows what `p` would do next.
    indicator = '⏸' if snapshot.running else '▶'
    color = timer_color(snapshot.elapsed)
    return f'[white]{indicator}[/]  [bold {color}]{format_duration(snapshot.elapsed)}[/]'

def renderControls(running: bool) -> str:
    if running:
        hints = ('SPACE: Lap', 'P: Pause', 'R: Reset', '↑↓: Scroll', 'Q: Quit')
    else:
        hints = ('P: Resume', 'R: Reset', '↑↓: Scroll', 'Q: Quit')
    return SEPARATOR.join(hints)

def renderLapRow(lap: Lap, selected: bool = False) -> str:
    row = (
        f'[yellow]Lap {lap.number:2}: [/]'
        f'[white]{format_duration(lap.lap_duration)}[/]'
        f'  (Total: [grey62]{format_duration(lap.cumulative_duration)}[/])'
    )
    if selected:
        return f'[bold white on blue]{row}[/]'
    return row

def lapsTitle(n_laps: int) -> str:
    if n_laps == 0:
        return 'Laps'
    return f'Laps ({n_laps}) - Use ↑↓ to scroll'

def lapsSubtitle(snapshot: Snapshot) -> str:
    lap = snapshot.selectedLap()
    if lap is None:
        return ''
    return f'Lap {lap.number} of {len(snapshot.laps)}'

def scrollOffset(
    offset: int, n_rows: int, selected: int | None, height: int, 
) -> int:
    '''
    First visible row, moved as little as possible to keep `selected` 
    inside a viewport of `height` rows.  
    '''
    if height <= 0:
        return 0
    offset = max(0, min(offset, n_rows - height))
    if selected is None:
        return offset
    if selected < offset:
        return selected
    if selected >= offset + height:
        return selected - height + 1
    return offset

def renderLaps(snapshot: Snapshot, offset: int, height: int) -> str:
    if not snapshot.laps:
        return f'[grey62]{EMPTY_LAPS_HINT}[/]'
    rows = snapshot.lapsNewestFirst()[offset : offset + height]
    return '\n'.join(
        renderLapRow(lap, selected=(offset + i == snapshot.selected_lap_index))
        for i, lap in enumerate(rows)
    )
