"""Public entry point: cheapest cost and optimal-tile count for one maze."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set, Tuple

from reindeer.errors import InvalidInputError
from reindeer.planner import SearchConfig, SearchEngine, optimal_tiles
from reindeer.types import Heading, Position, State
from reindeer.utils.maze_map import MazeMap


@dataclass(slots=True)
class SolveReport:
    minimal_cost: int
    tiles: Set[Position] = field(default_factory=set)
    expansions: int = 0
    admissions: int = 0

    @property
    def tile_count(self) -> int:
        return len(self.tiles)

    def answers(self) -> Tuple[int, int]:
        return self.minimal_cost, self.tile_count


def validate_endpoints(maze: MazeMap, start: Position, goal: Position) -> None:
    for label, pos in (("start", start), ("goal", goal)):
        if not maze.in_bounds(pos):
            raise InvalidInputError(f"{label} {pos} lies outside the {maze.shape} maze")
        if not maze.is_open(pos):
            raise InvalidInputError(f"{label} {pos} is a wall")
    if start == goal:
        raise InvalidInputError(f"start and goal coincide at {start}")


def solve_report(
    maze: MazeMap,
    start: Position,
    start_heading: Heading,
    goal: Position,
    config: Optional[SearchConfig] = None,
) -> SolveReport:
    validate_endpoints(maze, start, goal)
    result = SearchEngine(config).search(maze, State(start, start_heading), goal)
    return SolveReport(
        minimal_cost=result.minimal_cost,
        tiles=optimal_tiles(result),
        expansions=result.expansions,
        admissions=result.admissions,
    )


def solve(
    maze: MazeMap,
    start: Position,
    start_heading: Heading,
    goal: Position,
    config: Optional[SearchConfig] = None,
) -> Tuple[int, int]:
    """Return ``(minimal_cost, optimal_path_tile_count)``.

    Raises InvalidInputError for bad endpoints and UnreachableGoalError when
    no sequence of moves reaches the goal.
    """
    return solve_report(maze, start, start_heading, goal, config).answers()
