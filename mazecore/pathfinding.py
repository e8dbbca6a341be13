"""Breadth-first shortest paths over the maze grid.

A step between two 4-adjacent cells is legal when the walkability oracle
says so. ``wall_oracle`` consults the maze's wall pairs; ``open_oracle``
allows any in-grid step and reproduces the permissive "ignore walls" mode.

"No path" is returned as ``None``. Coordinates outside the grid are a caller
error and raise ``OutOfBoundsError``. Each call allocates its own queue and
predecessor map, so concurrent calls over an unchanging maze are safe. Cost
is O(width * height) per call.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Optional

from .constants import DIRECTIONS, Coord, Oracle
from .errors import OutOfBoundsError
from .util import step

if TYPE_CHECKING:
    from .maze import MazeModel

log = logging.getLogger(__name__)


def wall_oracle(maze: MazeModel) -> Oracle:
    return maze.is_open


def open_oracle(maze: MazeModel) -> Oracle:
    def can_move(a: Coord, b: Coord) -> bool:
        return maze.in_bounds(a) and maze.in_bounds(b)

    return can_move


def find_path(
    start: Coord, target: Coord, width: int, height: int, can_move: Oracle
) -> Optional[list[Coord]]:
    for cell in (start, target):
        x, z = cell
        if not (0 <= x < width and 0 <= z < height):
            log.warning("path request outside the %dx%d grid: %s", width, height, cell)
            raise OutOfBoundsError(cell, width, height)

    if start == target:
        return [start]

    q = deque([start])
    prev: dict[Coord, Optional[Coord]] = {start: None}

    while q:
        cur = q.popleft()
        if cur == target:
            break
        for direction in DIRECTIONS:
            nx, nz = step(cur, direction)
            if 0 <= nx < width and 0 <= nz < height and (nx, nz) not in prev and can_move(cur, (nx, nz)):
                prev[(nx, nz)] = cur
                q.append((nx, nz))

    if target not in prev:
        log.debug("no path from %s to %s", start, target)
        return None

    path: list[Coord] = []
    node: Optional[Coord] = target
    while node is not None:
        path.append(node)
        node = prev[node]
    path.reverse()
    return path


def look_ahead(path: Optional[list[Coord]], max_steps: int, show_full: bool = False) -> list[tuple[Coord, Coord]]:
    """The window of path steps to show, nearest first."""
    if not path or len(path) < 2:
        return []
    n = len(path) - 1 if show_full else min(max(0, max_steps), len(path) - 1)
    return [(path[i], path[i + 1]) for i in range(n)]


class GridPathfinder:
    """Shortest paths over one maze, walls respected unless told otherwise."""

    def __init__(
        self,
        maze: MazeModel,
        can_move: Optional[Oracle] = None,
        respect_walls: bool = True,
    ) -> None:
        self.maze = maze
        if can_move is None:
            can_move = wall_oracle(maze) if respect_walls else open_oracle(maze)
        self.can_move = can_move

    def find_path(self, start: Coord, target: Coord) -> Optional[list[Coord]]:
        return find_path(start, target, self.maze.width, self.maze.height, self.can_move)
