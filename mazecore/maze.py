"""Maze model: cell grid, wall bitmasks and backtracker generation.

The grid is ``width`` cells along x (east) by ``height`` cells along z
(north). Each cell carries a wall bitmask over N/E/S/W. Walls between two
in-grid cells are always opened in pairs, so ``is_open(a, b)`` and
``is_open(b, a)`` agree.

Generation is the iterative recursive-backtracker: after it the open-wall
graph is a spanning tree over all cells. The optional exit opening is the one
wall that is forced open afterwards; on the exit cell's boundary it only lets
an observer step out of the grid.

``generate()`` is O(width * height) in time and memory.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from typing import Optional

from .constants import (
    DIRECTIONS,
    EAST,
    NORTH,
    OPEN,
    OPPOSITE,
    SOUTH,
    WALL,
    WEST,
    Coord,
)
from .errors import InvalidDimensionsError, InvalidDirectionError, OutOfBoundsError
from .models import Cell
from .util import clamp, direction_between, step

log = logging.getLogger(__name__)


def difficulty_to_size(d: int) -> tuple[int, int]:
    d = int(clamp(d, 1, 100))
    cw = 8 + int(d * 0.50)
    ch = 8 + int(d * 0.35)
    return cw, ch


def _blank_cells(width: int, height: int) -> list[list[Cell]]:
    return [[Cell(x, z) for x in range(width)] for z in range(height)]


class MazeModel:
    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        exit_opening: bool = False,
    ) -> None:
        for v in (width, height):
            if not isinstance(v, int) or isinstance(v, bool) or v < 1:
                raise InvalidDimensionsError(width, height)
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.exit_opening = exit_opening
        self.has_exit_opening = False
        self.generation = 0
        self._cells = _blank_cells(self.width, self.height)

    # ----- geometry -----

    @property
    def start(self) -> Coord:
        return (0, 0)

    @property
    def exit(self) -> Coord:
        return (self.width - 1, self.height - 1)

    def in_bounds(self, cell: Coord) -> bool:
        x, z = cell
        return 0 <= x < self.width and 0 <= z < self.height

    def cell(self, x: int, z: int) -> Cell:
        if not self.in_bounds((x, z)):
            raise OutOfBoundsError((x, z), self.width, self.height)
        return self._cells[z][x]

    # ----- generation -----

    def generate(self) -> None:
        """Replace the current layout with a freshly generated perfect maze."""
        log.info("generating %dx%d maze", self.width, self.height)
        cells = _blank_cells(self.width, self.height)

        def unvisited_neighbors(c: Cell) -> list[tuple[int, Cell]]:
            out = []
            for direction in DIRECTIONS:
                nx, nz = step((c.x, c.z), direction)
                if 0 <= nx < self.width and 0 <= nz < self.height and not cells[nz][nx].visited:
                    out.append((direction, cells[nz][nx]))
            return out

        first = cells[0][0]
        first.visited = True
        stack = [first]

        while stack:
            cur = stack[-1]
            neigh = unvisited_neighbors(cur)
            if neigh:
                direction, nxt = self.rng.choice(neigh)
                cur.walls &= ~direction
                nxt.walls &= ~OPPOSITE[direction]
                nxt.visited = True
                stack.append(nxt)
            else:
                stack.pop()

        # Swap in only once the layout is complete.
        self._cells = cells
        self.has_exit_opening = False
        self.generation += 1
        if self.exit_opening:
            self.open_exit()
        log.info("maze generation complete")

    def open_exit(self, direction: int = NORTH) -> None:
        """Force one wall of the exit cell open.

        Breaks the spanning-tree property when ``direction`` leads to another
        in-grid cell (the pair is opened and may close a cycle).
        """
        if direction not in DIRECTIONS:
            raise InvalidDirectionError(direction)
        ex, ez = self.exit
        self._cells[ez][ex].walls &= ~direction
        nb = step(self.exit, direction)
        if self.in_bounds(nb):
            self._cells[nb[1]][nb[0]].walls &= ~OPPOSITE[direction]
        self.has_exit_opening = True

    # ----- queries -----

    def walls(self, x: int, z: int) -> int:
        return self.cell(x, z).walls

    def has_wall(self, x: int, z: int, direction: int) -> bool:
        return self.cell(x, z).has_wall(direction)

    def is_open(self, a: Coord, b: Coord) -> bool:
        if not (self.in_bounds(a) and self.in_bounds(b)):
            return False
        try:
            direction = direction_between(a, b)
        except ValueError:
            return False
        return not self._cells[a[1]][a[0]].has_wall(direction)

    def open_neighbors(self, cell: Coord) -> list[Coord]:
        out = []
        for direction in DIRECTIONS:
            nb = step(cell, direction)
            if self.in_bounds(nb) and not self.cell(*cell).has_wall(direction):
                out.append(nb)
        return out

    def edges(self) -> Iterator[tuple[Coord, Coord]]:
        """Each open in-grid wall pair once, as (cell, east/north neighbor)."""
        for row in self._cells:
            for c in row:
                for direction in (NORTH, EAST):
                    nb = step((c.x, c.z), direction)
                    if self.in_bounds(nb) and not c.has_wall(direction):
                        yield (c.x, c.z), nb

    def wall_layout(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(c.walls for c in row) for row in self._cells)

    def to_grid(self) -> list[str]:
        """Character grid of (2*width+1) x (2*height+1), north on top.

        Cell (x, z) sits at column 2*x+1, row 2*(height-1-z)+1.
        """
        W = self.width * 2 + 1
        H = self.height * 2 + 1
        grid = [[WALL] * W for _ in range(H)]
        for row in self._cells:
            for c in row:
                gx = 2 * c.x + 1
                gy = 2 * (self.height - 1 - c.z) + 1
                grid[gy][gx] = OPEN
                if not c.has_wall(NORTH):
                    grid[gy - 1][gx] = OPEN
                if not c.has_wall(SOUTH):
                    grid[gy + 1][gx] = OPEN
                if not c.has_wall(EAST):
                    grid[gy][gx + 1] = OPEN
                if not c.has_wall(WEST):
                    grid[gy][gx - 1] = OPEN
        return ["".join(row) for row in grid]

    def __repr__(self) -> str:
        return f"MazeModel({self.width}x{self.height}, generation={self.generation})"
