# classic_snake/runners/run_snake.py
from __future__ import annotations
from classic_snake.config import AppConfig
from classic_snake.core.highscore import JSONScoreStore
from classic_snake.core.session import Session, EAT, GAME_OVER
from classic_snake.viz.keyboard import Keyboard, QUIT, NEW_GAME
from classic_snake.viz.renderer_pygame import PygameRenderer

def handle(session: Session, cmd) -> bool:
    """Apply one input command. Returns False when the player asked to quit."""
    if cmd == QUIT:
        return False
    if cmd == NEW_GAME:
        if not session.game_started:
            session.new_game()
            print(f"[snake] new game  high={session.high_score}")
        return True
    session.steer(cmd)
    return True

def main(cfg: AppConfig) -> None:
    store = JSONScoreStore(cfg.highscore_path)
    session = Session(store=store, seed=cfg.seed)

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard(pad=rend.pad)
    print(f"[snake] high score {session.high_score}  ({store.path})")

    running = True
    try:
        while running:
            for cmd in kbd.poll():
                running = handle(session, cmd)
                if not running:
                    break
            outcome = session.update()
            if outcome == EAT:
                print(f"[snake] score={session.score}  interval={session.interval}ms")
            elif outcome == GAME_OVER:
                print(f"[snake] game over ({session.reason})  score={session.score}  high={session.high_score}")
            rend.draw(session.snapshot())
            rend.tick(cfg.fps)
    finally:
        rend.close()
