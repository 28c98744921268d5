"""Planner exports."""

from .frontier import Frontier
from .path_union import count_optimal_tiles, optimal_tiles
from .search import SearchConfig, SearchEngine, SearchResult
from .state_space import advance, rotate_left, rotate_right, transitions

__all__ = [
    "Frontier",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
    "advance",
    "count_optimal_tiles",
    "optimal_tiles",
    "rotate_left",
    "rotate_right",
    "transitions",
]
