# classic_snake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Optional, Protocol, Callable
import numpy as np

Coord = Tuple[int, int]
Clock = Callable[[], int]   # milliseconds

@dataclass(frozen=True)
class Snapshot:
    parts: Tuple[Coord, ...]   # head first
    fruit: Optional[Coord]
    heading: Coord
    board: np.ndarray          # read-only copy, [y, x]
    score: int
    high_score: int
    interval: int
    is_game_over: bool
    game_started: bool
    reason: str | None
    tick_count: int
    board_size: int

    @property
    def head(self) -> Optional[Coord]:
        return self.parts[0] if self.parts else None

class ScoreStore(Protocol):
    """Key-value storage for the persisted high score."""
    def load(self) -> int: ...
    def save(self, value: int) -> None: ...

