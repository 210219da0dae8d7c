# classic_snake/core/highscore.py
from __future__ import annotations
import json, os
from typing import Dict, Any
from classic_snake.config import HIGHSCORE_KEY

class JSONScoreStore:
    """High score kept as {"highscore": int} in a small JSON file."""
    def __init__(self, path: str, key: str = HIGHSCORE_KEY):
        self.path = os.path.expanduser(path)
        self.key = key

    def load(self) -> int:
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return 0
        if not isinstance(data, dict):
            return 0
        return _as_score(data.get(self.key))

    def save(self, value: int) -> None:
        d = os.path.dirname(self.path)
        if d:
            os.makedirs(d, exist_ok=True)
        bundle: Dict[str, Any] = {self.key: int(value)}
        tmp = self.path + ".tmp"
        with open(tmp, "w") as f:
            json.dump(bundle, f)
        os.replace(tmp, self.path)

    def clear(self) -> None:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass

class MemoryScoreStore:
    """In-process store (tests, headless runs)."""
    def __init__(self, value: Any = 0):
        self.value = value
        self.writes = 0

    def load(self) -> int:
        return _as_score(self.value)

    def save(self, value: int) -> None:
        self.value = int(value)
        self.writes += 1

def _as_score(raw: Any) -> int:
    # bools are ints in python; a stored true/false is corrupt, not a score
    if isinstance(raw, bool):
        return 0
    try:
        v = int(raw)
    except (TypeError, ValueError, OverflowError):
        return 0
    return v if v >= 0 else 0
