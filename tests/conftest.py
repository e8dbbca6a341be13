"""Test configuration.

Pytest sometimes runs with the current working directory set to ``tests/``.
Make sure the project root (and thus the ``mazecore`` package) is importable.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from mazecore.maze import MazeModel


class FirstChoice:
    """Stand-in rng that always takes the first candidate (N, E, S, W order)."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def spiral_maze() -> MazeModel:
    """3x3 maze carved with FirstChoice.

    Layout (x right, z up), one corridor from (0,0) to (1,1):

        (0,2) - (1,2) - (2,2)
          |               |
        (0,1)   (1,1)   (2,1)
          |       |       |
        (0,0)   (1,0) - (2,0)
    """
    maze = MazeModel(3, 3, rng=FirstChoice())
    maze.generate()
    return maze


@pytest.fixture
def first_choice() -> FirstChoice:
    return FirstChoice()
