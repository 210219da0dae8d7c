# classic_snake/core/session.py  (pure rules, no drawing)
from __future__ import annotations
from typing import List, Optional, Dict, Any
import random
from classic_snake.config import (
    BOARD_SIZE, START_INTERVAL_MS, SPEED_STEP_MS, SPEEDUP_EVERY,
    START_PARTS, START_HEADING, FRUIT_MAX_TRIES,
)
from .board import Board
from .directions import DIRS, reverse, advance
from .highscore import MemoryScoreStore
from .interfaces import Coord, Snapshot, ScoreStore
from .ticker import Ticker

CONTINUE = "continue"
EAT = "eat"
GAME_OVER = "game_over"

class Session:
    """
    One snake game: board, snake, fruit, score and the tick loop driving them.
    States: not started -> playing -> game over -> playing (new_game) -> ...
    """
    def __init__(
        self,
        store: Optional[ScoreStore] = None,
        ticker: Optional[Ticker] = None,
        seed: Optional[int] = None,
    ):
        self.store = store if store is not None else MemoryScoreStore()
        self.ticker = ticker if ticker is not None else Ticker()
        self.rng = random.Random(seed)
        self.board = Board(BOARD_SIZE)
        self.high_score = self.store.load()
        self.parts: List[Coord] = []
        self.heading: Coord = START_HEADING
        self.pending_heading: Coord = START_HEADING
        self.fruit: Optional[Coord] = None
        self.score = 0
        self.interval = START_INTERVAL_MS
        self.pending_growth = 0
        self.tick_count = 0
        self.is_game_over = False
        self.game_started = False
        self.reason: str | None = None

    # ---- lifecycle ----
    def new_game(self) -> Snapshot:
        self.board.clear()
        self.ticker.stop()
        self.is_game_over = False
        self.game_started = True
        self.reason = None
        self.score = 0
        self.heading = START_HEADING
        self.pending_heading = START_HEADING
        self.interval = START_INTERVAL_MS
        self.pending_growth = 0
        self.tick_count = 0
        self.parts = list(START_PARTS)
        for p in self.parts:
            self.board.occupy(p)
        self.reset_fruit()
        self.ticker.start()
        return self.snapshot()

    def game_over(self, reason: str | None = None) -> None:
        self.ticker.stop()
        if self.score > self.high_score:
            self.high_score = self.score
            try:
                self.store.save(self.high_score)
            except OSError as e:
                print(f"[highscore] could not save {self.high_score}: {e}")
        self.reason = reason
        self.is_game_over = True
        self.game_started = False
        self.board.clear()

    # ---- input ----
    def steer(self, direction: Coord) -> bool:
        """Buffer a heading for the next tick. The exact reverse of the current heading is refused."""
        if direction not in DIRS:
            return False
        if direction == reverse(self.heading):
            return False
        self.pending_heading = direction
        return True

    # ---- loop ----
    def update(self) -> Optional[str]:
        """Run one tick if the ticker is due. Returns the tick outcome or None."""
        if not self.game_started or not self.ticker.due():
            return None
        return self.tick()

    def tick(self) -> str:
        if not self.game_started:
            return GAME_OVER
        new_head = advance(self.parts[0], self.pending_heading)
        self.tick_count += 1

        # walls before body: an off-board head must never index the board
        if not self.board.in_bounds(new_head):
            self.game_over("wall")
            return GAME_OVER
        # board still holds the tail here, so chasing the tail is a collision
        if self.board.is_occupied(new_head):
            self.game_over("self")
            return GAME_OVER

        ate = new_head == self.fruit
        if ate:
            self.eat_fruit()

        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self.board.vacate(self.parts.pop())

        self.parts.insert(0, new_head)
        self.board.occupy(new_head)
        self.heading = self.pending_heading

        if ate:
            self.reset_fruit()
        self.ticker.schedule(self.interval)
        return EAT if ate else CONTINUE

    def eat_fruit(self) -> None:
        self.score += 1
        self.pending_growth += 1
        if self.score % SPEEDUP_EVERY == 0:
            self.interval -= SPEED_STEP_MS

    def reset_fruit(self) -> Optional[Coord]:
        """Rejection-sample a free cell; after FRUIT_MAX_TRIES take the first free cell."""
        n = self.board.size
        if self.board.occupied_count() == n * n:
            self.fruit = None
            return None
        for _ in range(FRUIT_MAX_TRIES):
            c = (self.rng.randrange(n), self.rng.randrange(n))
            if not self.board.is_occupied(c):
                self.fruit = c
                return c
        free = self.board.free_cells()
        self.fruit = free[0] if free else None
        return self.fruit

    # ---- views ----
    @property
    def head(self) -> Optional[Coord]:
        return self.parts[0] if self.parts else None

    def snapshot(self) -> Snapshot:
        return Snapshot(
            parts=tuple(self.parts),
            fruit=self.fruit,
            heading=self.heading,
            board=self.board.copy(),
            score=self.score,
            high_score=self.high_score,
            interval=self.interval,
            is_game_over=self.is_game_over,
            game_started=self.game_started,
            reason=self.reason,
            tick_count=self.tick_count,
            board_size=self.board.size,
        )

    def get_state(self) -> Dict[str, Any]:
        """Pure-Python, JSON-serializable state (plus RNG)."""
        return {
            "parts": list(self.parts),
            "heading": self.heading,
            "pending_heading": self.pending_heading,
            "fruit": self.fruit,
            "score": self.score,
            "high_score": self.high_score,
            "interval": self.interval,
            "pending_growth": self.pending_growth,
            "tick_count": self.tick_count,
            "is_game_over": self.is_game_over,
            "game_started": self.game_started,
            "reason": self.reason,
            "rng_state": self.rng.getstate(),
        }

    def set_state(self, state: Dict[str, Any]) -> None:
        """Restore exact internal state; the board is rebuilt from the parts."""
        parts = [tuple(p) for p in state["parts"]]
        if len(set(parts)) != len(parts):
            raise ValueError("snake parts overlap")
        if not all(self.board.in_bounds(p) for p in parts):
            raise ValueError("snake parts off the board")
        fruit = state.get("fruit")
        if fruit is not None:
            fruit = tuple(fruit)
            if fruit in parts:
                raise ValueError("fruit on the snake body")
        heading = tuple(state["heading"])
        pending = tuple(state.get("pending_heading", heading))
        if heading not in DIRS or pending not in DIRS:
            raise ValueError("heading must be one of the four directions")
        if pending == reverse(heading):
            raise ValueError("pending heading reverses the heading")

        self.parts = parts
        self.heading = heading
        self.pending_heading = pending
        self.fruit = fruit
        self.score = int(state["score"])
        self.high_score = int(state.get("high_score", self.high_score))
        self.interval = int(state.get("interval", START_INTERVAL_MS))
        self.pending_growth = int(state.get("pending_growth", 0))
        self.tick_count = int(state.get("tick_count", 0))
        self.is_game_over = bool(state.get("is_game_over", False))
        self.game_started = bool(state.get("game_started", True))
        self.reason = state.get("reason")
        if "rng_state" in state:
            rs = state["rng_state"]
            self.rng.setstate((rs[0], tuple(rs[1]), rs[2]))

        self.board.clear()
        if not self.is_game_over:
            for p in self.parts:
                self.board.occupy(p)
