# classic_snake/core/ticker.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from .interfaces import Clock

class Ticker:
    """
    One-shot deadline timer polled from the frame loop.
    The owner reschedules after each tick, so the next delay can depend on
    state the tick just changed (e.g. a faster interval after eating).
    """
    def __init__(self, clock: Optional[Clock] = None):
        self._clock: Clock = clock or pg.time.get_ticks
        self._deadline: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._deadline is not None

    @property
    def deadline(self) -> Optional[int]:
        return self._deadline

    def start(self) -> None:
        # first tick is due immediately
        self._deadline = self._clock()

    def stop(self) -> None:
        self._deadline = None

    def reset(self) -> None:
        self.stop()
        self.start()

    def schedule(self, delay_ms: int) -> None:
        self._deadline = self._clock() + max(0, int(delay_ms))

    def due(self) -> bool:
        """True once the deadline has passed; the deadline is consumed."""
        if self._deadline is None or self._clock() < self._deadline:
            return False
        self._deadline = None
        return True
