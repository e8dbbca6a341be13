# -*- coding: utf-8 -*-
"""Exceptions raised by the maze core."""
from __future__ import annotations


class MazeError(ValueError):
    """Base class for caller errors against the maze core."""


class InvalidDimensionsError(MazeError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"maze dimensions must be integers >= 1, got {width!r}x{height!r}")
        self.width = width
        self.height = height


class OutOfBoundsError(MazeError):
    def __init__(self, cell: tuple[int, int], width: int, height: int) -> None:
        super().__init__(f"cell {cell} is outside the {width}x{height} grid")
        self.cell = cell
        self.width = width
        self.height = height


class InvalidDirectionError(MazeError):
    def __init__(self, direction: int) -> None:
        super().__init__(f"not a single wall direction: {direction!r}")
        self.direction = direction
