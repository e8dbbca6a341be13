# -*- coding: utf-8 -*-
"""Core data models (cells, observer state, configuration)."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .constants import (
    ALL_WALLS,
    ARROW_HEIGHT,
    CELL_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_ARROWS,
    Coord,
)


@dataclass
class Cell:
    x: int
    z: int
    walls: int = ALL_WALLS
    visited: bool = False  # generation-time only

    def has_wall(self, direction: int) -> bool:
        return bool(self.walls & direction)


@dataclass
class Observer:
    x: float
    y: float
    z: float


@dataclass
class Arrow:
    """One look-ahead step, placed halfway between two path cells."""

    index: int
    from_cell: Coord
    to_cell: Coord
    position: tuple[float, float, float]
    heading: float  # radians in the x/z plane, 0 = east, pi/2 = north
    progress: float  # 0 at the observer end of the window

    @property
    def heading_degrees(self) -> float:
        return math.degrees(self.heading)


@dataclass
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[int] = None
    exit_opening: bool = True

    respect_walls: bool = True
    show_full_path: bool = False
    max_arrows: int = MAX_ARROWS

    cell_size: float = CELL_SIZE
    arrow_height: float = ARROW_HEIGHT
    origin: tuple[float, float, float] = (0.0, 0.0, 0.0)

    unicode: bool = False
