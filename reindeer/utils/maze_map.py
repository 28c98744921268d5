"""Maze traversability oracle and the text-grid parser that feeds it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

from reindeer.errors import InvalidInputError
from reindeer.types import Position

LOGGER = logging.getLogger(__name__)

WALL = "#"
START_MARK = "S"
GOAL_MARK = "E"


class MazeMap:
    """Read-only boolean grid; ``True`` marks an open cell."""

    def __init__(self, open_mask: Sequence[Sequence[bool]] | np.ndarray):
        mask = np.array(open_mask, dtype=bool)
        if mask.ndim != 2:
            raise InvalidInputError(f"Maze mask must be 2-D, got shape {mask.shape}")
        mask.setflags(write=False)
        self._open = mask

    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self._open.shape
        return rows, cols

    @property
    def open_mask(self) -> np.ndarray:
        return self._open

    def in_bounds(self, position: Position) -> bool:
        r, c = position
        rows, cols = self._open.shape
        return 0 <= r < rows and 0 <= c < cols

    def is_open(self, position: Position) -> bool:
        if not self.in_bounds(position):
            return False
        r, c = position
        return bool(self._open[r, c])

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"MazeMap({rows}x{cols}, open={int(self._open.sum())})"


@dataclass(slots=True)
class ParsedMaze:
    maze: MazeMap
    start: Position
    goal: Position


def passable_mask(rows: Sequence[str], blocked: Iterable[str] = (WALL,)) -> List[List[bool]]:
    """Compute a boolean passability grid from text rows.

    Ragged rows are padded with blocked cells up to the widest row.
    """

    walls: Set[str] = set(blocked)
    width = max((len(row) for row in rows), default=0)
    grid: List[List[bool]] = []
    for row in rows:
        cells = [ch not in walls for ch in row]
        cells.extend([False] * (width - len(row)))
        grid.append(cells)
    return grid


def parse_maze(text: str) -> ParsedMaze:
    """Parse a maze drawn with ``#`` walls, one ``S`` start and one ``E`` goal."""

    rows = text.splitlines()
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise InvalidInputError("Maze text is empty")

    start: Optional[Position] = None
    goal: Optional[Position] = None
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == START_MARK:
                if start is not None:
                    raise InvalidInputError(f"Duplicate start marker at {(r, c)}")
                start = (r, c)
            elif ch == GOAL_MARK:
                if goal is not None:
                    raise InvalidInputError(f"Duplicate goal marker at {(r, c)}")
                goal = (r, c)
    if start is None or goal is None:
        raise InvalidInputError("Maze must contain exactly one S and one E")

    maze = MazeMap(passable_mask(rows))
    LOGGER.debug("Parsed %r start=%s goal=%s", maze, start, goal)
    return ParsedMaze(maze=maze, start=start, goal=goal)


__all__ = [
    "MazeMap",
    "ParsedMaze",
    "parse_maze",
    "passable_mask",
]
