import time
import typing as tp

Clock = tp.Callable[[], float]

monotonic: Clock = time.monotonic

class FakeClock:
    '''
    A manually advanced monotonic clock.  
    Call it like `time.monotonic`.  
    '''
    def __init__(self, start: float = 0.0) -> None:
        self.now = start
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError(f'Monotonic clocks never go backwards: {seconds = }')
        self.now += seconds
