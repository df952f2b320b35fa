"""Command-line entry point: load a level and run the game loop."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from dwarfgame.game import Game

DEFAULT_LEVEL = "levels/lvl0.txt"
UPDATE_TARGET = 0.016  # about 60 frames per second


def read_level(path: str | Path) -> list[str]:
    """The lines of a level file; a trailing newline yields a final empty line."""
    try:
        with open(path, encoding="utf-8") as level:
            text = level.read()
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"File not found: {path}") from exc
    return text.split("\n")


def adaptive_loop(game: Game, last_time: float, update_target: float = 0.0) -> float:
    """Run one frame, sleep to hold ``update_target`` seconds per frame, report FPS.

    Returns the time at which the frame started, to pass back as ``last_time``.
    """
    current = game.elapsed
    elapsed = current - last_time

    game.handle_input()
    game.update(elapsed)
    game.render(elapsed)

    remaining = update_target - (game.elapsed - current)
    if remaining > 0:
        time.sleep(remaining)

    duration = game.elapsed - current
    if duration > 0:
        game.set_fps(int(1 / duration))
    return current


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play the dwarf mini-game.")
    parser.add_argument("level", nargs="?", default=DEFAULT_LEVEL, help="level file to load")
    args = parser.parse_args(argv)

    lines = read_level(args.level)
    game = Game()
    with game.window:
        game.init(lines)
        last_time = game.elapsed
        while not game.window.is_done:
            last_time = adaptive_loop(game, last_time, UPDATE_TARGET)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())