# classic_snake/viz/renderer_pygame.py
from __future__ import annotations
from typing import Optional, Tuple
import pygame as pg
from classic_snake.config import AppConfig, BOARD_SIZE
from classic_snake.core.interfaces import Snapshot
from classic_snake.core.projection import kind_grid
from .controls import ControlPad
from . import renderer_colors as theme

class PygameRenderer:
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self.pad: Optional[ControlPad] = None
        self._font: Optional[pg.font.Font] = None
        self._auto_flip = True

    def window_size(self, cfg: AppConfig) -> Tuple[int, int]:
        side = BOARD_SIZE * cfg.render_cell
        h = side
        if cfg.render_show_hud:
            h += cfg.render_hud_px
        if cfg.render_show_controls:
            h += ControlPad(side, h, cfg.render_button_px).height
        return side, h

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self._setup(cfg)
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self.window_size(cfg))
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface (offscreen, embedded); no flip, no clock."""
        self._setup(cfg)
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def _setup(self, cfg: AppConfig) -> None:
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        side = BOARD_SIZE * self.cell
        top = side + (cfg.render_hud_px if cfg.render_show_hud else 0)
        self.pad = ControlPad(side, top, cfg.render_button_px) if cfg.render_show_controls else None
        self._font = None
        if cfg.render_show_hud or cfg.render_show_controls:
            if not pg.font.get_init():
                pg.font.init()
            self._font = pg.font.SysFont(None, 22)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.PANEL)
        grid = kind_grid(s)
        for y in range(s.board_size):
            for x in range(s.board_size):
                pg.draw.rect(surf, theme.BY_KIND[int(grid[y, x])], pg.Rect(x * c, y * c, c, c))

        if self.cfg.render_show_hud and self._font is not None:
            txt = self._font.render(f"Score: {s.score}   High score: {s.high_score}   {self._hint(s)}",
                                    True, theme.TEXT)
            surf.blit(txt, (6, s.board_size * c + 6))

        if self.pad is not None:
            self.pad.draw(surf, self._font)

        if self._auto_flip:
            pg.display.flip()

    @staticmethod
    def _hint(s: Snapshot) -> str:
        if s.is_game_over:
            return f"Game over ({s.reason}) - Space for a new game"
        if not s.game_started:
            return "Space to start"
        return ""

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
