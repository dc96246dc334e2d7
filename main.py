"""
main.py — Entry point.

Run with:
    python main.py [--speed N] [--auto-restart]

Requires:
    pip install pygame
"""

import argparse
import logging

from arkanoid.config import ON_WIN_RESTART, RESTART_DELAY, GRID_ROWS, GRID_COLS, GameConfig
from arkanoid.controller import GameController
from arkanoid.logging_config import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Double Arkanoid: light vs dark")
    parser.add_argument("--speed", type=int, default=1,
                        help="simulation steps per rendered frame")
    parser.add_argument("--auto-restart", action="store_true",
                        help="start immediately and start a new match after each win")
    parser.add_argument("--restart-delay", type=float, default=RESTART_DELAY,
                        help="seconds to wait before an automatic restart")
    parser.add_argument("--rows", type=int, default=GRID_ROWS)
    parser.add_argument("--cols", type=int, default=GRID_COLS)
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    kwargs = dict(
        rows=args.rows,
        cols=args.cols,
        speed_multiplier=args.speed,
        restart_delay=args.restart_delay,
    )
    if args.auto_restart:
        kwargs.update(auto_start=True, on_win=ON_WIN_RESTART)
    return GameConfig(**kwargs)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    GameController(build_config(args)).run()


if __name__ == "__main__":
    main()
