# classic_snake/config.py
from dataclasses import dataclass, replace
from typing import Optional

# fixed game rules
BOARD_SIZE = 20
START_INTERVAL_MS = 300
SPEED_STEP_MS = 15
SPEEDUP_EVERY = 3
START_PARTS = ((8, 8), (9, 8), (10, 8))   # head first
START_HEADING = (-1, 0)                   # left
FRUIT_MAX_TRIES = BOARD_SIZE * BOARD_SIZE * 4
HIGHSCORE_KEY = "highscore"

@dataclass(frozen=True, slots=True)
class AppConfig:
    # shared / global
    seed: Optional[int] = None
    highscore_path: str = "~/.classic_snake/highscore.json"

    # frame loop (ticks are timed separately by the session)
    fps: int = 60

    # render
    render_cell: int = 24
    render_title: str = "Snake"
    render_show_hud: bool = True
    render_show_controls: bool = True
    render_hud_px: int = 28
    render_button_px: int = 36

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
