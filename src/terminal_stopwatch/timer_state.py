from __future__ import annotations

import logging
from datetime import timedelta

from .clock import Clock, monotonic
from .shared import Lap, Snapshot

log = logging.getLogger(__name__)

class TimerState:
    '''
    Pause-aware elapsed time plus a lap log.  
    All instants are `timedelta`s on the clock's own axis, so every 
    difference below is exact integer-microsecond arithmetic.  
    Elapsed time is `now - anchor_start`. Resuming shifts `anchor_start` 
    (and the lap origin `last_event_instant`) forward by the paused span.  
    '''
    def __init__(self, clock: Clock = monotonic) -> None:
        self.clock = clock
        now = self.now()
        self.anchor_start = now
        self.last_event_instant = now
        self.paused_at: timedelta | None = None
        self.running = True
        self.laps: list[Lap] = []
        self.selected_lap_index: int | None = None
    
    def now(self) -> timedelta:
        return timedelta(seconds=self.clock())
    
    def effectiveNow(self) -> timedelta:
        '''
        While paused, time stands still at the pause boundary.  
        '''
        if self.running:
            return self.now()
        assert self.paused_at is not None
        return self.paused_at
    
    def elapsed_time(self) -> timedelta:
        return self.effectiveNow() - self.anchor_start
    
    def toggle_pause(self) -> None:
        if self.running:
            self.paused_at = self.now()
            self.running = False
            log.debug('Paused at %s elapsed.', self.elapsed_time())
            return
        assert self.paused_at is not None
        paused_duration = self.now() - self.paused_at
        self.anchor_start += paused_duration
        self.last_event_instant += paused_duration
        self.paused_at = None
        self.running = True
        log.debug('Resumed after a %s pause.', paused_duration)
    
    def add_lap(self) -> None:
        t = self.effectiveNow()
        lap = Lap(
            number=len(self.laps) + 1,
            lap_duration=t - self.last_event_instant,
            cumulative_duration=t - self.anchor_start,
        )
        self.laps.append(lap)
        self.last_event_instant = t
        self.selected_lap_index = 0
        log.info(
            'Lap %d: %s (total %s)', 
            lap.number, lap.lap_duration, lap.cumulative_duration, 
        )
    
    def reset(self) -> None:
        now = self.now()
        self.anchor_start = now
        self.last_event_instant = now
        self.paused_at = None
        self.running = True
        self.laps.clear()
        self.selected_lap_index = None
        log.debug('Reset.')
    
    def scroll_up(self) -> None:
        if not self.laps:
            return
        match self.selected_lap_index:
            case None:
                self.selected_lap_index = 0
            case 0:
                self.selected_lap_index = len(self.laps) - 1
            case i:
                self.selected_lap_index = i - 1
    
    def scroll_down(self) -> None:
        if not self.laps:
            return
        match self.selected_lap_index:
            case None:
                self.selected_lap_index = 0
            case i if i >= len(self.laps) - 1:
                self.selected_lap_index = 0
            case i:
                self.selected_lap_index = i + 1
    
    def snapshot(self) -> Snapshot:
        return Snapshot(
            elapsed=self.elapsed_time(),
            running=self.running,
            laps=tuple(self.laps),
            selected_lap_index=self.selected_lap_index,
        )
