# src/termsnake/main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import Config, GRID_H, GRID_W, POLL_TIMEOUT_MS, TICK_INTERVAL_MS
from .errors import ConfigError
from .frontends import FRONTENDS, get_player
from .model import Phase

logger = logging.getLogger("termsnake")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in your terminal.")
    parser.add_argument("--frontend", choices=FRONTENDS, default="terminal",
                        help="terminal (curses) or window (pygame)")
    parser.add_argument("--width", type=int, default=GRID_W, help="playfield width in cells")
    parser.add_argument("--height", type=int, default=GRID_H, help="playfield height in cells")
    parser.add_argument("--tick-ms", type=int, default=TICK_INTERVAL_MS,
                        help="milliseconds between snake moves")
    parser.add_argument("--poll-ms", type=int, default=POLL_TIMEOUT_MS,
                        help="longest wait for input per frame")
    parser.add_argument("--initial-length", type=int, default=3)
    parser.add_argument("--seed", type=int, default=None, help="seed food placement")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None,
                        help="write logs here (the terminal frontend logs nothing otherwise)")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        width=args.width,
        height=args.height,
        tick_interval_ms=args.tick_ms,
        initial_length=args.initial_length,
        poll_timeout_ms=args.poll_ms,
        seed=args.seed,
    )


def configure_logging(level: str, log_file: Optional[str], frontend: str) -> None:
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if log_file:
        logging.basicConfig(level=level, format=fmt, filename=log_file)
    elif frontend == "terminal":
        # stderr shares the screen with curses
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])
    else:
        logging.basicConfig(level=level, format=fmt)


def summary(phase: Phase, score: int) -> str:
    if phase is Phase.WON:
        return f"You win! Score: {score}"
    if phase is Phase.LOST:
        return f"Game Over! Score: {score}"
    return f"Quit. Score: {score}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    configure_logging(args.log_level, args.log_file, args.frontend)
    logger.info("starting %s frontend with %s", args.frontend, config)

    play = get_player(args.frontend)
    final = play(config)
    print(summary(final.phase, final.score))
    return 0


if __name__ == "__main__":
    sys.exit(main())
