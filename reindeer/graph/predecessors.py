"""Append-only predecessor relation over cost-stamped states."""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterator, Set, Tuple

from reindeer.types import CostStampedState


class PredecessorRelation:
    """Maps each cost-stamped state to the stamps that reach it at that exact cost.

    Edges arriving at the same (cost, position, heading) merge under one key,
    which is how cost-tied optimal paths are kept side by side.
    """

    def __init__(self) -> None:
        self._incoming: Dict[CostStampedState, Set[CostStampedState]] = {}
        self._edge_count = 0

    # ----------------------------------------------------------------- mutations
    def record(self, target: CostStampedState, source: CostStampedState) -> bool:
        """Add the edge ``target <- source``; return False if it was already known."""
        sources = self._incoming.setdefault(target, set())
        if source in sources:
            return False
        sources.add(source)
        self._edge_count += 1
        return True

    # ------------------------------------------------------------------- queries
    def predecessors(self, target: CostStampedState) -> FrozenSet[CostStampedState]:
        return frozenset(self._incoming.get(target, ()))

    def edges(self) -> Iterator[Tuple[CostStampedState, CostStampedState]]:
        """Yield ``(target, source)`` pairs."""
        for target, sources in self._incoming.items():
            for source in sources:
                yield target, source

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __contains__(self, target: object) -> bool:
        return target in self._incoming

    def __len__(self) -> int:
        return len(self._incoming)
