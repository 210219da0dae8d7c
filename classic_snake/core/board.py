# classic_snake/core/board.py
from __future__ import annotations
from typing import List
import numpy as np
from .interfaces import Coord

class Board:
    """Occupancy grid for the snake body. Indexed [y, x]; knows nothing about collisions."""
    def __init__(self, size: int):
        self.size = size
        self.cells = np.zeros((size, size), dtype=bool)

    def clear(self) -> None:
        self.cells.fill(False)

    def occupy(self, c: Coord) -> None:
        x, y = c
        self.cells[y, x] = True

    def vacate(self, c: Coord) -> None:
        x, y = c
        self.cells[y, x] = False

    def is_occupied(self, c: Coord) -> bool:
        x, y = c
        return bool(self.cells[y, x])

    def in_bounds(self, c: Coord) -> bool:
        x, y = c
        return 0 <= x < self.size and 0 <= y < self.size

    def free_cells(self) -> List[Coord]:
        """Unoccupied cells in row-major order."""
        ys, xs = np.nonzero(~self.cells)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def occupied_count(self) -> int:
        return int(self.cells.sum())

    def copy(self) -> np.ndarray:
        out = self.cells.copy()
        out.setflags(write=False)
        return out
