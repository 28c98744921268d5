"""Core value types shared across the maze stack."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Tuple

from reindeer.errors import InvalidInputError

Position = Tuple[int, int]  # (row, col)

TransitionKind = Literal["ADVANCE", "ROTATE_LEFT", "ROTATE_RIGHT"]

ADVANCE_COST = 1
ROTATE_COST = 1000


class Heading(Enum):
    """Cardinal facing; the value is the (drow, dcol) of one advance."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def delta(self) -> Position:
        return self.value

    def turn_left(self) -> "Heading":
        dr, dc = self.value
        return Heading((-dc, dr))

    def turn_right(self) -> "Heading":
        dr, dc = self.value
        return Heading((dc, -dr))

    @classmethod
    def parse(cls, name: str) -> "Heading":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidInputError(f"Unknown heading {name!r}") from None


@dataclass(frozen=True, slots=True)
class State:
    """Search node: where the walker stands and which way it faces."""

    position: Position
    heading: Heading

    def stamp(self, cost: int) -> "CostStampedState":
        return CostStampedState(cost=cost, position=self.position, heading=self.heading)


@dataclass(frozen=True, slots=True)
class CostStampedState:
    """A state reached at one exact cumulative cost.

    Used as the predecessor-relation key. The same (position, heading) at a
    different cost is a different key.
    """

    cost: int
    position: Position
    heading: Heading

    @property
    def state(self) -> State:
        return State(position=self.position, heading=self.heading)


@dataclass(frozen=True, slots=True)
class Transition:
    kind: TransitionKind
    cost: int
    state: State


__all__ = [
    "ADVANCE_COST",
    "ROTATE_COST",
    "CostStampedState",
    "Heading",
    "Position",
    "State",
    "Transition",
    "TransitionKind",
]
