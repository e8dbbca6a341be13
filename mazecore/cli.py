"""Command-line entrypoint: generate a maze and print it with the guide path."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .errors import MazeError
from .game import GameSession
from .maze import difficulty_to_size
from .models import Settings
from .render_map import render_map


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mazecore", description=__doc__)
    p.add_argument("--width", type=int, default=None, help="maze width in cells")
    p.add_argument("--height", type=int, default=None, help="maze height in cells")
    p.add_argument("--difficulty", type=int, default=None, help="1..100, sets the size when width/height are omitted")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--no-exit", action="store_true", help="keep the exit cell fully walled")
    p.add_argument("--ignore-walls", action="store_true", help="guide path ignores maze walls")
    p.add_argument("--full-path", action="store_true", help="show the whole route, not just the look-ahead window")
    p.add_argument("--max-arrows", type=int, default=Settings.max_arrows)
    p.add_argument("--unicode", action="store_true", help="use Unicode arrow glyphs")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def settings_from_args(args: argparse.Namespace) -> Settings:
    s = Settings(
        seed=args.seed,
        exit_opening=not args.no_exit,
        respect_walls=not args.ignore_walls,
        show_full_path=args.full_path,
        max_arrows=args.max_arrows,
        unicode=args.unicode,
    )
    if args.difficulty is not None:
        s.width, s.height = difficulty_to_size(args.difficulty)
    if args.width is not None:
        s.width = args.width
    if args.height is not None:
        s.height = args.height
    return s


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = settings_from_args(args)
    try:
        session = GameSession(settings)
    except MazeError as e:
        parser.error(str(e))

    session.start()
    guide = session.guide
    shown = guide.path[: len(guide.arrows) + 1]
    for line in render_map(session.maze, shown, unicode_ok=settings.unicode):
        print(line)

    full = guide.path
    if full:
        print(f"route to exit: {len(full) - 1} steps, showing {len(guide.arrows)}")
    else:
        print("no route to exit")
    return 0


if __name__ == "__main__":
    sys.exit(main())
