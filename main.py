# main.py
import argparse

from config import AppConfig
from core.interfaces import heading_from_name
from runners.run_snake import main as snake
from runners.run_headless import main as headless

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Snake on a fixed grid")
    p.add_argument("mode", choices=["snake", "headless"])
    p.add_argument("--grid-size", type=int, default=10)
    p.add_argument("--tick-ms", type=int, default=300)
    p.add_argument("--win", type=int, default=5, help="apples to eat to win")
    p.add_argument("--heading", default="down", choices=["up", "down", "left", "right"])
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--cell-px", type=int, default=48)
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("--log", default=None, help="append status events to this CSV file")
    p.add_argument("--max-steps", type=int, default=200, help="headless only")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    return AppConfig(
        grid_size=args.grid_size,
        tick_ms=args.tick_ms,
        win_condition=args.win,
        initial_heading=heading_from_name(args.heading),
        seed=args.seed,
        fps=args.fps,
        render_cell=args.cell_px,
        render_grid_lines=args.grid_lines,
        log_path=args.log,
    )

def main(argv=None):
    args = parse_args(argv)
    try:
        cfg = build_config(args)
    except ValueError as e:
        raise SystemExit(f"invalid configuration: {e}")
    if args.mode == "snake":
        snake(cfg)
    elif args.mode == "headless":
        headless(cfg, max_steps=args.max_steps)

if __name__ == "__main__":
    main()
