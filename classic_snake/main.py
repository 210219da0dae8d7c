# classic_snake/main.py
import argparse

from classic_snake.config import AppConfig
from classic_snake.core.highscore import JSONScoreStore

def run_play(cfg: AppConfig):
    """Open the game window (human control)."""
    from classic_snake.runners.run_snake import main as snake
    snake(cfg)

def run_highscore(cfg: AppConfig):
    store = JSONScoreStore(cfg.highscore_path)
    print(f"[highscore] {store.load()}  ({store.path})")

def run_reset_highscore(cfg: AppConfig):
    store = JSONScoreStore(cfg.highscore_path)
    store.clear()
    print(f"[highscore] cleared ({store.path})")

def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(prog="classic-snake")
    p.add_argument("mode", nargs="?", default="play", choices=["play", "highscore", "reset-highscore"])
    p.add_argument("--seed", type=int, default=d.seed)
    p.add_argument("--fps", type=int, default=d.fps)
    p.add_argument("--cell-px", type=int, default=d.render_cell)
    p.add_argument("--highscore-file", default=d.highscore_path)
    p.add_argument("--no-controls", action="store_true", help="hide the on-screen control pad")
    return p.parse_args(argv)

def config_from_args(args) -> AppConfig:
    return AppConfig().with_(
        seed=args.seed,
        fps=args.fps,
        render_cell=args.cell_px,
        highscore_path=args.highscore_file,
        render_show_controls=not args.no_controls,
    )

def main(argv=None):
    args = parse_args(argv)
    cfg = config_from_args(args)
    if args.mode == "play":
        run_play(cfg)
    elif args.mode == "highscore":
        run_highscore(cfg)
    elif args.mode == "reset-highscore":
        run_reset_highscore(cfg)

if __name__ == "__main__":
    main()
