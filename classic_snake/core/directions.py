# classic_snake/core/directions.py
from __future__ import annotations
from .interfaces import Coord

LEFT: Coord = (-1, 0)
UP: Coord = (0, -1)
RIGHT: Coord = (1, 0)
DOWN: Coord = (0, 1)

DIRS = [LEFT, UP, RIGHT, DOWN]

def reverse(d: Coord) -> Coord:
    return (-d[0], -d[1])

def advance(c: Coord, d: Coord) -> Coord:
    return (c[0] + d[0], c[1] + d[1])
