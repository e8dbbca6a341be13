# -*- coding: utf-8 -*-
"""Project-wide constants and type aliases for the maze core."""
from __future__ import annotations

from typing import Callable

# ----- Grid -----
NORTH = 1
EAST = 2
SOUTH = 4
WEST = 8
ALL_WALLS = NORTH | EAST | SOUTH | WEST

# Neighbor iteration order everywhere: N, E, S, W.
DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

DELTAS = {
    NORTH: (0, 1),
    EAST: (1, 0),
    SOUTH: (0, -1),
    WEST: (-1, 0),
}

OPPOSITE = {
    NORTH: SOUTH,
    EAST: WEST,
    SOUTH: NORTH,
    WEST: EAST,
}


# ----- Text map -----
WALL = "#"
OPEN = " "
START_MARK = "S"
EXIT_MARK = "E"
OBSERVER_MARK = "@"

# ----- World defaults -----
DEFAULT_WIDTH = 15
DEFAULT_HEIGHT = 15
CELL_SIZE = 4.0
EYE_HEIGHT = 1.0  # observer spawns this far above the floor

ARROW_HEIGHT = 2.0
MAX_ARROWS = 10

Coord = tuple[int, int]
Oracle = Callable[[Coord, Coord], bool]
