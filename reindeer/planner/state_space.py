"""Legal moves of a walker on the maze: advance one cell or turn 90 degrees."""

from __future__ import annotations

from typing import Iterator, Optional

from reindeer.types import ADVANCE_COST, ROTATE_COST, State, Transition
from reindeer.utils.maze_map import MazeMap


def advance(maze: MazeMap, state: State) -> Optional[Transition]:
    """Step forward along the current heading, or None if the cell ahead is a wall."""
    r, c = state.position
    dr, dc = state.heading.delta
    ahead = (r + dr, c + dc)
    if not maze.is_open(ahead):
        return None
    return Transition(kind="ADVANCE", cost=ADVANCE_COST, state=State(ahead, state.heading))


def rotate_left(state: State) -> Transition:
    return Transition(
        kind="ROTATE_LEFT",
        cost=ROTATE_COST,
        state=State(state.position, state.heading.turn_left()),
    )


def rotate_right(state: State) -> Transition:
    return Transition(
        kind="ROTATE_RIGHT",
        cost=ROTATE_COST,
        state=State(state.position, state.heading.turn_right()),
    )


def transitions(maze: MazeMap, state: State) -> Iterator[Transition]:
    step = advance(maze, state)
    if step is not None:
        yield step
    yield rotate_left(state)
    yield rotate_right(state)
