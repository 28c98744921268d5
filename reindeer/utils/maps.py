"""Helpers for lightweight ASCII maze renderings."""

from __future__ import annotations

from typing import Collection, List, Optional

from reindeer.types import Position
from reindeer.utils.maze_map import GOAL_MARK, START_MARK, WALL, MazeMap

TILE_MARK = "O"
OPEN_MARK = "."


def render_optimal_tiles(
    maze: MazeMap,
    tiles: Collection[Position],
    start: Optional[Position] = None,
    goal: Optional[Position] = None,
) -> str:
    """Return the maze with every optimal-path tile marked ``O``.

    Start and goal keep their ``S``/``E`` markers when given.
    """
    rows, cols = maze.shape
    marked = set(tiles)
    lines: List[str] = []
    for r in range(rows):
        cells: List[str] = []
        for c in range(cols):
            key = (r, c)
            if key == start:
                cell = START_MARK
            elif key == goal:
                cell = GOAL_MARK
            elif not maze.is_open(key):
                cell = WALL
            elif key in marked:
                cell = TILE_MARK
            else:
                cell = OPEN_MARK
            cells.append(cell)
        lines.append("".join(cells))
    return "\n".join(lines)
