"""Search-graph exports."""

from .predecessors import PredecessorRelation

__all__ = [
    "PredecessorRelation",
]
