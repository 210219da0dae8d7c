# tests/test_renderer.py
import pygame as pg
import pytest
from classic_snake.config import AppConfig, BOARD_SIZE
from classic_snake.viz import renderer_colors as theme
from classic_snake.viz.renderer_pygame import PygameRenderer

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

@pytest.fixture
def cfg():
    return AppConfig(render_cell=10)

@pytest.fixture
def renderer(cfg):
    r = PygameRenderer()
    w, h = r.window_size(cfg)
    r.attach_surface(pg.Surface((w, h)), cfg)
    return r

def center(cfg, x, y):
    c = cfg.render_cell
    return (x * c + c // 2, y * c + c // 2)

def test_window_size_includes_hud_and_pad(cfg):
    r = PygameRenderer()
    w, h = r.window_size(cfg)
    assert w == BOARD_SIZE * 10
    assert h > BOARD_SIZE * 10 + cfg.render_hud_px
    bare = cfg.with_(render_show_hud=False, render_show_controls=False)
    assert r.window_size(bare) == (BOARD_SIZE * 10, BOARD_SIZE * 10)

def test_draw_colors_cells(renderer, cfg, playing):
    renderer.draw(playing.snapshot())
    surf = renderer.surf
    assert _rgb(surf.get_at(center(cfg, 5, 5))) == theme.FOOD
    assert _rgb(surf.get_at(center(cfg, 8, 8))) == theme.HEAD
    assert _rgb(surf.get_at(center(cfg, 10, 8))) == theme.BODY
    assert _rgb(surf.get_at(center(cfg, 15, 15))) == theme.BG

def test_draw_game_over(renderer, cfg, playing):
    playing.game_over("wall")
    renderer.draw(playing.snapshot())
    assert _rgb(renderer.surf.get_at(center(cfg, 8, 8))) == theme.GAME_OVER
    assert _rgb(renderer.surf.get_at(center(cfg, 0, 19))) == theme.GAME_OVER

def test_draw_requires_open(playing):
    with pytest.raises(AssertionError):
        PygameRenderer().draw(playing.snapshot())

def test_open_rejects_config_class():
    with pytest.raises(TypeError):
        PygameRenderer().open(AppConfig)
