"""Lattice geometry: points, compass headings, relative turns and walk state.

Every type here is an immutable value. Transitions return new values and
never mutate their inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    """A cell on the unbounded integer lattice."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)


ORIGIN = Point(0, 0)


class Turn(Enum):
    """Relative rotation applied to a heading. Value is the input letter."""

    LEFT = "L"
    RIGHT = "R"


class Heading(Enum):
    """Compass heading. Value is the unit vector ``(dx, dy)``; north is +y."""

    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def right(self) -> Heading:
        """Rotate one step clockwise."""
        order = _CLOCKWISE
        return order[(order.index(self) + 1) % len(order)]

    def left(self) -> Heading:
        """Rotate one step counter-clockwise."""
        order = _CLOCKWISE
        return order[(order.index(self) - 1) % len(order)]

    def turned(self, turn: Turn) -> Heading:
        return self.left() if turn is Turn.LEFT else self.right()

    @classmethod
    def from_name(cls, name: str) -> Heading:
        """Look up a heading by case-insensitive name (``"north"`` -> NORTH)."""
        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            valid = ", ".join(h.name.lower() for h in cls)
            raise ValueError(f"heading must be one of {valid}") from exc


_CLOCKWISE: tuple[Heading, ...] = (Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST)


@dataclass(frozen=True)
class State:
    """Position and facing direction of the walker."""

    position: Point
    heading: Heading


def taxicab_distance(a: Point, b: Point) -> int:
    """Sum of absolute coordinate differences between two points."""
    return abs(b.x - a.x) + abs(b.y - a.y)
