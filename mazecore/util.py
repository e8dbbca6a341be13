# -*- coding: utf-8 -*-
"""Small helpers used across modules."""
from __future__ import annotations

from .constants import DELTAS, Coord


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def step(cell: Coord, direction: int) -> Coord:
    dx, dz = DELTAS[direction]
    return cell[0] + dx, cell[1] + dz


def direction_between(a: Coord, b: Coord) -> int:
    """Direction of the unit step a -> b. Raises ValueError if not adjacent."""
    delta = (b[0] - a[0], b[1] - a[1])
    for direction, d in DELTAS.items():
        if d == delta:
            return direction
    raise ValueError(f"cells {a} and {b} are not 4-adjacent")
