"""Walk the predecessor DAG backwards to collect every tile on an optimal path."""

from __future__ import annotations

from typing import List, Set

from reindeer.planner.search import SearchResult
from reindeer.types import CostStampedState, Heading, Position


def optimal_tiles(result: SearchResult) -> Set[Position]:
    """Return the distinct positions touched by any minimal-cost path.

    Seeds are the goal stamped at the minimal cost for each heading that was
    actually reached at that cost. Cost strictly drops along every edge, so
    the walk terminates without cycle checks; ``seen`` only stops shared
    ancestors from being expanded twice.
    """
    relation = result.predecessors
    worklist: List[CostStampedState] = []
    seen: Set[CostStampedState] = set()
    for heading in Heading:
        seed = CostStampedState(result.minimal_cost, result.goal, heading)
        if seed in relation:
            worklist.append(seed)
            seen.add(seed)

    tiles: Set[Position] = set()
    while worklist:
        node = worklist.pop()
        tiles.add(node.position)
        for parent in relation.predecessors(node):
            if parent not in seen:
                seen.add(parent)
                worklist.append(parent)
    return tiles


def count_optimal_tiles(result: SearchResult) -> int:
    return len(optimal_tiles(result))
