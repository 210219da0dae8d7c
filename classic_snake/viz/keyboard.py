# classic_snake/viz/keyboard.py
from __future__ import annotations
from typing import Iterable, List, Optional, Union
import pygame as pg
from classic_snake.core.directions import LEFT, UP, RIGHT, DOWN
from classic_snake.core.interfaces import Coord

QUIT = "quit"
NEW_GAME = "new_game"

Command = Union[str, Coord]

KEYMAP = {
    pg.K_LEFT: LEFT,
    pg.K_UP: UP,
    pg.K_RIGHT: RIGHT,
    pg.K_DOWN: DOWN,
    pg.K_SPACE: NEW_GAME,
    pg.K_RETURN: NEW_GAME,
    pg.K_KP_ENTER: NEW_GAME,
    pg.K_ESCAPE: QUIT,
}

class Keyboard:
    """Turns pygame events into commands. Unknown keys are dropped."""
    def __init__(self, pad=None):
        self.pad = pad   # optional ControlPad for mouse clicks

    def translate(self, e: pg.event.Event) -> Optional[Command]:
        if e.type == pg.QUIT:
            return QUIT
        if e.type == pg.KEYDOWN:
            return KEYMAP.get(e.key)
        if e.type == pg.MOUSEBUTTONDOWN and e.button == 1 and self.pad is not None:
            return self.pad.hit(e.pos)
        return None

    def poll(self, events: Optional[Iterable[pg.event.Event]] = None) -> List[Command]:
        if events is None:
            events = pg.event.get()
        out = []
        for e in events:
            cmd = self.translate(e)
            if cmd is not None:
                out.append(cmd)
        return out
