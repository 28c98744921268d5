"""Dijkstra search over (position, heading) states that keeps every cost tie."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from reindeer.errors import SearchLimitExceededError, UnreachableGoalError
from reindeer.graph import PredecessorRelation
from reindeer.planner.frontier import Frontier
from reindeer.planner.state_space import transitions
from reindeer.types import Position, State, TransitionKind
from reindeer.utils.maze_map import MazeMap

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchConfig:
    """Configuration for maze search."""

    max_expansions: Optional[int] = None  # Optional cap on expanded states.


@dataclass(slots=True)
class SearchResult:
    minimal_cost: int
    goal: Position
    predecessors: PredecessorRelation
    expansions: int = 0
    admissions: int = 0


class SearchEngine:
    """Compute the cheapest cost to a goal cell and the predecessor DAG behind it."""

    def __init__(self, config: SearchConfig | None = None):
        self.config = config or SearchConfig()

    def search(self, maze: MazeMap, start: State, goal: Position) -> SearchResult:
        frontier = Frontier()
        predecessors = PredecessorRelation()
        frontier.admit(start, 0)
        expansions = 0
        moves_by_kind: Counter[TransitionKind] = Counter()

        while True:
            current = frontier.pop()
            if current is None:
                raise UnreachableGoalError(
                    f"Goal {goal} unreachable from {start.position} facing {start.heading.name}"
                )
            if current.position == goal:
                LOGGER.debug(
                    "Search reached %s at cost %s (expansions=%s admissions=%s keys=%s edges=%s moves=%s)",
                    goal,
                    current.cost,
                    expansions,
                    frontier.admissions,
                    len(predecessors),
                    predecessors.edge_count,
                    dict(moves_by_kind),
                )
                return SearchResult(
                    minimal_cost=current.cost,
                    goal=goal,
                    predecessors=predecessors,
                    expansions=expansions,
                    admissions=frontier.admissions,
                )
            expansions += 1
            if self.config.max_expansions and expansions > self.config.max_expansions:
                raise SearchLimitExceededError(
                    f"Search exceeded {self.config.max_expansions} expansions"
                )
            for move in transitions(maze, current.state):
                cost = current.cost + move.cost
                moves_by_kind[move.kind] += 1
                frontier.admit(move.state, cost)
                predecessors.record(move.state.stamp(cost), current)
