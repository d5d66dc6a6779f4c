from enum import Enum

from .timer_state import TimerState

class Command(Enum):
    Lap = 'lap'
    TogglePause = 'toggle_pause'
    Reset = 'reset'
    ScrollUp = 'scroll_up'
    ScrollDown = 'scroll_down'
    Quit = 'quit'

# key name (as Textual spells it) -> command. Unlisted keys are ignored.
KEYMAP: dict[str, Command] = {
    'space':  Command.Lap,
    'p':      Command.TogglePause,
    'r':      Command.Reset,
    'up':     Command.ScrollUp,
    'down':   Command.ScrollDown,
    'q':      Command.Quit,
    'escape': Command.Quit,
}

def apply(state: TimerState, command: Command) -> bool:
    '''
    Returns whether the loop should keep going.  
    '''
    match command:
        case Command.Lap:
            state.add_lap()
        case Command.TogglePause:
            state.toggle_pause()
        case Command.Reset:
            state.reset()
        case Command.ScrollUp:
            state.scroll_up()
        case Command.ScrollDown:
            state.scroll_down()
        case Command.Quit:
            return False
    return True
