# tests/test_projection.py
import numpy as np
from classic_snake.core import projection as P

def test_kinds_follow_state(playing):
    s = playing.snapshot()
    assert P.cell_kind(s, 5, 5) == P.FRUIT
    assert P.cell_kind(s, 8, 8) == P.HEAD
    assert P.cell_kind(s, 9, 8) == P.BODY
    assert P.cell_kind(s, 10, 8) == P.BODY
    assert P.cell_kind(s, 0, 0) == P.EMPTY

def test_game_over_overrides_everything(playing):
    playing.game_over("wall")
    s = playing.snapshot()
    assert all(P.cell_kind(s, x, y) == P.GAME_OVER for x in range(3) for y in range(3))
    assert (P.kind_grid(s) == P.GAME_OVER).all()

def test_fruit_beats_head(playing):
    # not reachable through play, but the priority order is fixed
    playing.fruit = (8, 8)
    s = playing.snapshot()
    assert P.cell_kind(s, 8, 8) == P.FRUIT
    assert P.kind_grid(s)[8, 8] == P.FRUIT

def test_grid_matches_per_cell_rule(playing):
    playing.tick()
    playing.steer((0, -1))
    playing.tick()
    s = playing.snapshot()
    grid = P.kind_grid(s)
    expected = np.array([[P.cell_kind(s, x, y) for x in range(s.board_size)]
                         for y in range(s.board_size)])
    assert (grid == expected).all()

def test_unstarted_board_is_blank(session_factory):
    s = session_factory().snapshot()
    assert s.head is None
    assert (P.kind_grid(s) == P.EMPTY).all()
