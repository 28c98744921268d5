"""Cost-ordered frontier with admission deduplicated by (position, heading)."""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, Set, Tuple

from reindeer.types import CostStampedState, State


class Frontier:
    """Min-heap of pending states keyed by ``State``, ignoring cost.

    A state is admitted once. A later discovery at the same or higher cost is
    refused. A strictly cheaper discovery replaces the pending entry while the
    state is still unfinalised; the stale heap entry is skipped on pop. Once a
    state has been popped it is final and never admitted again.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, State]] = []
        self._pending: Dict[State, int] = {}
        self._finalized: Set[State] = set()
        self._counter = itertools.count()
        self.admissions = 0

    def admit(self, state: State, cost: int) -> bool:
        if state in self._finalized:
            return False
        known = self._pending.get(state)
        if known is not None and known <= cost:
            return False
        self._pending[state] = cost
        heapq.heappush(self._heap, (cost, next(self._counter), state))
        self.admissions += 1
        return True

    def pop(self) -> Optional[CostStampedState]:
        """Finalise and return the cheapest pending state, or None when exhausted."""
        while self._heap:
            cost, _, state = heapq.heappop(self._heap)
            if self._pending.get(state) != cost:
                continue  # superseded or already final
            del self._pending[state]
            self._finalized.add(state)
            return state.stamp(cost)
        return None

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)
