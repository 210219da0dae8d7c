# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so classic_snake.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

class FakeClock:
    """Millisecond clock the tests move by hand."""
    def __init__(self, now=0):
        self.now = now
    def __call__(self):
        return self.now
    def advance(self, ms):
        self.now += ms

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def session_factory(clock):
    from classic_snake.core.session import Session
    from classic_snake.core.ticker import Ticker
    from classic_snake.core.highscore import MemoryScoreStore
    def make(high_score=0, seed=0, store=None):
        store = store if store is not None else MemoryScoreStore(high_score)
        return Session(store=store, ticker=Ticker(clock=clock), seed=seed)
    return make

@pytest.fixture
def playing(session_factory):
    """A fresh game with the fruit parked out of the way at (5, 5)."""
    s = session_factory()
    s.new_game()
    s.fruit = (5, 5)
    return s

@pytest.fixture
def body_matches_board():
    def check(s):
        occupied = {(int(x), int(y)) for y, x in zip(*s.board.cells.nonzero())}
        return occupied == set(s.parts)
    return check
