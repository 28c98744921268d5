"""Exceptions raised by the maze search stack."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for every failure the solver reports."""


class InvalidInputError(SearchError, ValueError):
    """Input rejected before any search work starts."""


class UnreachableGoalError(SearchError):
    """The frontier ran dry before the goal position was popped."""


class SearchLimitExceededError(SearchError):
    """The configured expansion cap was hit."""


__all__ = [
    "InvalidInputError",
    "SearchError",
    "SearchLimitExceededError",
    "UnreachableGoalError",
]
