# -*- coding: utf-8 -*-
"""Observer guidance: track the observer's cell and lay arrows along the path."""
from __future__ import annotations

import logging
import math
from typing import Optional

from .constants import ARROW_HEIGHT, CELL_SIZE, MAX_ARROWS, Coord
from .errors import OutOfBoundsError
from .maze import MazeModel
from .models import Arrow
from .pathfinding import GridPathfinder, look_ahead
from .util import clamp

log = logging.getLogger(__name__)


class PathGuide:
    def __init__(
        self,
        maze: MazeModel,
        pathfinder: GridPathfinder,
        cell_size: float = CELL_SIZE,
        origin: tuple[float, float, float] = (0.0, 0.0, 0.0),
        arrow_height: float = ARROW_HEIGHT,
        max_arrows: int = MAX_ARROWS,
        show_full_path: bool = False,
    ) -> None:
        self.maze = maze
        self.pathfinder = pathfinder
        self.cell_size = cell_size
        self.origin = origin
        self.arrow_height = arrow_height
        self.max_arrows = max_arrows
        self.show_full_path = show_full_path

        self.visible = True
        self.target: Coord = maze.exit
        self.observer_cell: Optional[Coord] = None
        self._path: list[Coord] = []
        self._arrows: list[Arrow] = []

    # ----- coordinate transforms -----

    def world_to_grid(self, x: float, z: float) -> Coord:
        ox, _, oz = self.origin
        gx = int(round((x - ox) / self.cell_size))
        gz = int(round((z - oz) / self.cell_size))
        return (
            int(clamp(gx, 0, self.maze.width - 1)),
            int(clamp(gz, 0, self.maze.height - 1)),
        )

    def grid_to_world(self, cell: Coord) -> tuple[float, float, float]:
        ox, oy, oz = self.origin
        return ox + cell[0] * self.cell_size, oy, oz + cell[1] * self.cell_size

    # ----- path -----

    @property
    def path(self) -> list[Coord]:
        return list(self._path)

    @property
    def arrows(self) -> list[Arrow]:
        """Arrows for the current look-ahead window; empty while hidden."""
        return list(self._arrows) if self.visible else []

    def update(self, x: float, z: float) -> bool:
        """Follow the observer. Returns True when the path was recomputed."""
        cell = self.world_to_grid(x, z)
        if cell == self.observer_cell:
            return False
        self.observer_cell = cell
        self.refresh()
        return True

    def set_target(self, cell: Coord) -> None:
        if not self.maze.in_bounds(cell):
            raise OutOfBoundsError(cell, self.maze.width, self.maze.height)
        self.target = cell
        log.debug("guide target set to %s", cell)
        if self.observer_cell is not None:
            self.refresh()

    def set_target_world(self, x: float, z: float) -> None:
        ox, _, oz = self.origin
        cell = (int(round((x - ox) / self.cell_size)), int(round((z - oz) / self.cell_size)))
        self.set_target(cell)

    def refresh(self) -> None:
        self.clear()
        if self.observer_cell is None:
            return
        path = self.pathfinder.find_path(self.observer_cell, self.target)
        if path is None:
            return
        self._path = path
        steps = look_ahead(path, self.max_arrows, self.show_full_path)
        total = len(steps)
        for i, (a, b) in enumerate(steps):
            self._arrows.append(self._arrow(i, a, b, total))

    def _arrow(self, index: int, a: Coord, b: Coord, total: int) -> Arrow:
        ax, _, az = self.grid_to_world(a)
        bx, _, bz = self.grid_to_world(b)
        return Arrow(
            index=index,
            from_cell=a,
            to_cell=b,
            position=((ax + bx) * 0.5, self.arrow_height, (az + bz) * 0.5),
            heading=math.atan2(bz - az, bx - ax),
            progress=index / total,
        )

    def clear(self) -> None:
        self._path = []
        self._arrows = []

    def reset(self) -> None:
        self.clear()
        self.observer_cell = None
        self.target = self.maze.exit

    def set_visible(self, visible: bool) -> None:
        self.visible = visible
