"""Game session: the start/quit shell around maze, pathfinder and guide.

A session owns one maze. ``start()`` regenerates it, puts the observer at the
entrance and enables controls; ``move_observer()`` feeds the guide while
controls are enabled. Regeneration and path queries happen in this one call
sequence, never interleaved.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .constants import EYE_HEIGHT
from .guide import PathGuide
from .maze import MazeModel
from .models import Observer, Settings
from .pathfinding import GridPathfinder

log = logging.getLogger(__name__)


class GameSession:
    def __init__(self, settings: Settings, rng: Optional[random.Random] = None) -> None:
        self.settings = settings
        if rng is None:
            rng = random.Random(settings.seed)
        self.maze = MazeModel(settings.width, settings.height, rng=rng, exit_opening=settings.exit_opening)
        self.pathfinder = GridPathfinder(self.maze, respect_walls=settings.respect_walls)
        self.guide = PathGuide(
            self.maze,
            self.pathfinder,
            cell_size=settings.cell_size,
            origin=settings.origin,
            arrow_height=settings.arrow_height,
            max_arrows=settings.max_arrows,
            show_full_path=settings.show_full_path,
        )
        self.observer = Observer(*self.start_position())
        self.controls_enabled = False
        self.finished = False
        self.won = False

    def start_position(self) -> tuple[float, float, float]:
        ox, oy, oz = self.settings.origin
        return ox, oy + EYE_HEIGHT, oz

    def exit_position(self) -> tuple[float, float, float]:
        ox, oy, oz = self.settings.origin
        ex, ez = self.maze.exit
        cs = self.settings.cell_size
        return ox + ex * cs, oy + EYE_HEIGHT, oz + ez * cs

    def start(self) -> None:
        """Begin a round on a brand-new maze."""
        self.maze.generate()
        self.guide.reset()
        self.observer = Observer(*self.start_position())
        self.controls_enabled = True
        self.finished = False
        self.won = False
        self.guide.update(self.observer.x, self.observer.z)
        log.info("game started on %r", self.maze)

    def move_observer(self, x: float, z: float, y: Optional[float] = None) -> bool:
        """Move the observer. Returns True if the guide path was recomputed."""
        if not self.controls_enabled:
            return False
        self.observer.x = x
        self.observer.z = z
        if y is not None:
            self.observer.y = y
        recomputed = self.guide.update(x, z)
        if self.observer_cell == self.maze.exit:
            self._win()
        return recomputed

    def _win(self) -> None:
        self.won = True
        self.controls_enabled = False
        log.info("observer reached the exit")

    @property
    def observer_cell(self):
        return self.guide.world_to_grid(self.observer.x, self.observer.z)

    @property
    def reached_exit(self) -> bool:
        return self.won

    def quit(self) -> None:
        self.controls_enabled = False
        self.guide.clear()
        self.finished = True
        log.info("game session closed")
