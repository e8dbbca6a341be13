# -*- coding: utf-8 -*-
"""Text map rendering with a path overlay."""
from __future__ import annotations

from typing import Optional, Sequence

from .constants import EAST, EXIT_MARK, NORTH, OBSERVER_MARK, SOUTH, START_MARK, Coord
from .maze import MazeModel
from .util import direction_between


def direction_glyph(direction: int, unicode_ok: bool = False) -> str:
    if not unicode_ok:
        if direction == NORTH:
            return "^"
        if direction == EAST:
            return ">"
        if direction == SOUTH:
            return "v"
        return "<"
    if direction == NORTH:
        return "▲"
    if direction == EAST:
        return "►"
    if direction == SOUTH:
        return "▼"
    return "◄"


def cell_to_map(maze: MazeModel, cell: Coord) -> tuple[int, int]:
    """Column/row of a cell in ``maze.to_grid()`` (north on top)."""
    x, z = cell
    return 2 * x + 1, 2 * (maze.height - 1 - z) + 1


def render_map(
    maze: MazeModel,
    path: Optional[Sequence[Coord]] = None,
    observer: Optional[Coord] = None,
    unicode_ok: bool = False,
) -> list[str]:
    rows = [list(r) for r in maze.to_grid()]

    def put(cell: Coord, ch: str) -> None:
        mx, my = cell_to_map(maze, cell)
        rows[my][mx] = ch

    if path:
        for a, b in zip(path, path[1:]):
            glyph = direction_glyph(direction_between(a, b), unicode_ok)
            ax, ay = cell_to_map(maze, a)
            bx, by = cell_to_map(maze, b)
            rows[ay][ax] = glyph
            rows[(ay + by) // 2][(ax + bx) // 2] = glyph

    put(maze.start, START_MARK)
    put(maze.exit, EXIT_MARK)
    if observer is not None:
        put(observer, OBSERVER_MARK)

    return ["".join(r) for r in rows]
