import random

from mazecore.constants import EAST, NORTH, SOUTH, WEST
from mazecore.maze import MazeModel
from mazecore.pathfinding import GridPathfinder
from mazecore.render_map import cell_to_map, direction_glyph, render_map


def test_direction_glyphs() -> None:
    assert [direction_glyph(d) for d in (NORTH, EAST, SOUTH, WEST)] == ["^", ">", "v", "<"]
    assert [direction_glyph(d, unicode_ok=True) for d in (NORTH, EAST, SOUTH, WEST)] == ["▲", "►", "▼", "◄"]


def test_cell_to_map_puts_north_on_top(spiral_maze: MazeModel) -> None:
    assert cell_to_map(spiral_maze, (0, 0)) == (1, 5)
    assert cell_to_map(spiral_maze, (2, 2)) == (5, 1)


def test_render_path_overlay(spiral_maze: MazeModel) -> None:
    path = GridPathfinder(spiral_maze).find_path(spiral_maze.start, spiral_maze.exit)
    assert render_map(spiral_maze, path) == [
        "#######",
        "#>>>>E#",
        "#^### #",
        "#^# # #",
        "#^# # #",
        "#S#   #",
        "#######",
    ]


def test_render_marks_observer(spiral_maze: MazeModel) -> None:
    lines = render_map(spiral_maze, observer=(1, 1))
    assert lines[3] == "# #@# #"
    assert lines[5][1] == "S"
    assert lines[1][5] == "E"


def test_render_path_only_on_open_cells() -> None:
    maze = MazeModel(6, 5, rng=random.Random(2))
    maze.generate()
    path = GridPathfinder(maze).find_path(maze.start, maze.exit)
    plain = maze.to_grid()
    drawn = render_map(maze, path, unicode_ok=True)

    assert len(drawn) == len(plain)
    for row_plain, row_drawn in zip(plain, drawn):
        for a, b in zip(row_plain, row_drawn):
            if a == "#":
                assert b == "#"
