# classic_snake/viz/controls.py
from __future__ import annotations
from typing import List, Optional, Tuple
import pygame as pg
from classic_snake.core.directions import LEFT, UP, RIGHT, DOWN
from .keyboard import Command, NEW_GAME
from . import renderer_colors as theme

class ControlPad:
    """On-screen arrow buttons plus a new-game button, laid out under the HUD."""
    def __init__(self, width: int, top: int, button_px: int = 36, margin: int = 6):
        self.width = width
        self.top = top
        self.b = button_px
        self.m = margin
        self.buttons: List[Tuple[str, Command, pg.Rect]] = self._layout()

    @property
    def height(self) -> int:
        return 3 * self.m + 2 * self.b

    def _layout(self) -> List[Tuple[str, Command, pg.Rect]]:
        b, m, top = self.b, self.m, self.top
        row1, row2 = top + m, top + 2 * m + b
        col = lambda i: m + i * (b + m)
        new_w = min(4 * b, max(b, self.width - col(3) - m))
        return [
            ("^", UP, pg.Rect(col(1), row1, b, b)),
            ("<", LEFT, pg.Rect(col(0), row2, b, b)),
            ("v", DOWN, pg.Rect(col(1), row2, b, b)),
            (">", RIGHT, pg.Rect(col(2), row2, b, b)),
            ("New game", NEW_GAME, pg.Rect(self.width - m - new_w, top + m + (b + m) // 2, new_w, b)),
        ]

    def hit(self, pos) -> Optional[Command]:
        for _, cmd, rect in self.buttons:
            if rect.collidepoint(pos):
                return cmd
        return None

    def draw(self, surf: pg.Surface, font: Optional[pg.font.Font] = None) -> None:
        for label, _, rect in self.buttons:
            pg.draw.rect(surf, theme.BUTTON, rect, border_radius=4)
            if font is not None:
                txt = font.render(label, True, theme.BUTTON_TEXT)
                surf.blit(txt, txt.get_rect(center=rect.center))
