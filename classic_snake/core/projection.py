# classic_snake/core/projection.py
from __future__ import annotations
import numpy as np
from .interfaces import Snapshot

# cell kinds, in no particular order; priority lives in cell_kind()
EMPTY, BODY, HEAD, FRUIT, GAME_OVER = range(5)

def cell_kind(s: Snapshot, x: int, y: int) -> int:
    if s.is_game_over:
        return GAME_OVER
    if s.fruit == (x, y):
        return FRUIT
    if s.head == (x, y):
        return HEAD
    if s.board[y, x]:
        return BODY
    return EMPTY

def kind_grid(s: Snapshot) -> np.ndarray:
    """Same rules as cell_kind() for every cell at once. Shape (size, size), [y, x]."""
    n = s.board_size
    if s.is_game_over:
        return np.full((n, n), GAME_OVER, dtype=np.int8)
    grid = np.where(s.board, BODY, EMPTY).astype(np.int8)
    if s.head is not None:
        hx, hy = s.head
        grid[hy, hx] = HEAD
    if s.fruit is not None:
        fx, fy = s.fruit
        grid[fy, fx] = FRUIT
    return grid
