import logging
import sys

from textual.app import App, ComposeResult, RenderResult, ScreenStackError
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Header, Static

from .clock import Clock, monotonic
from .commands import Command, KEYMAP, apply
from .render import (
    TITLE, renderTimer, renderControls, renderLaps, lapsTitle, lapsSubtitle,
    scrollOffset, 
)
from .shared import Snapshot, titled
from .timer_state import TimerState

log = logging.getLogger(__name__)

class LapList(Widget):
    snapshot: reactive[Snapshot | None] = reactive(None)

    def __init__(self, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.first_row = 0
    
    def render(self) -> RenderResult:
        if self.snapshot is None:
            return ''
        height = self.size.height
        self.first_row = scrollOffset(
            self.first_row, len(self.snapshot.laps), 
            self.snapshot.selected_lap_index, height, 
        )
        return renderLaps(self.snapshot, self.first_row, height)
    
    def watch_snapshot(self, _, new_snapshot: Snapshot | None) -> None:
        n_laps = 0 if new_snapshot is None else len(new_snapshot.laps)
        self.border_title = lapsTitle(n_laps)
        self.border_subtitle = (
            '' if new_snapshot is None else lapsSubtitle(new_snapshot)
        )
        self.set_class(n_laps == 0, 'empty')

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding(key, command.value, command.name, priority=True)
        for key, command in KEYMAP.items()
    ]

    def __init__(
        self, 
        clock: Clock = monotonic, 
        poll_interval: float = 0.05,    # seconds between idle re-renders
    ) -> None:
        super().__init__()

        self.state = TimerState(clock)
        self.poll_interval = poll_interval

        self.title = TITLE
    
    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield titled(Static('', id='timer'), 'Elapsed Time')
        yield titled(Static('', id='controls'), 'Controls')
        yield titled(LapList(id='laps'), 'Laps')
    
    def on_mount(self) -> None:
        self.set_interval(self.poll_interval, self.myUpdate)
        self.myUpdate()
    
    def runCommand(self, command: Command) -> None:
        if not apply(self.state, command):
            log.info('Quit with %d lap(s) recorded.', len(self.state.laps))
            self.exit(return_code=0)
            return
        self.myUpdate()
    
    def action_lap(self) -> None:
        self.runCommand(Command.Lap)
    
    def action_toggle_pause(self) -> None:
        self.runCommand(Command.TogglePause)
    
    def action_reset(self) -> None:
        self.runCommand(Command.Reset)
    
    def action_scroll_up(self) -> None:
        self.runCommand(Command.ScrollUp)
    
    def action_scroll_down(self) -> None:
        self.runCommand(Command.ScrollDown)
    
    def action_quit(self) -> None:
        self.runCommand(Command.Quit)
    
    def myUpdate(self) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        snapshot = self.state.snapshot()
        self.query_one('#timer', Static).update(renderTimer(snapshot))
        self.query_one('#controls', Static).update(
            renderControls(snapshot.running), 
        )
        self.query_one('#laps', LapList).snapshot = snapshot

def main() -> None:
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])
    app = UI()
    app.run()
    sys.exit(app.return_code or 0)
