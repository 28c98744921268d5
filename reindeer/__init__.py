"""Reindeer maze solver: minimal-cost search with every tied optimal path."""

from reindeer.errors import (
    InvalidInputError,
    SearchError,
    SearchLimitExceededError,
    UnreachableGoalError,
)
from reindeer.solver import SolveReport, solve, solve_report
from reindeer.types import CostStampedState, Heading, Position, State

__all__ = [
    "CostStampedState",
    "Heading",
    "InvalidInputError",
    "Position",
    "SearchError",
    "SearchLimitExceededError",
    "SolveReport",
    "State",
    "UnreachableGoalError",
    "solve",
    "solve_report",
]
