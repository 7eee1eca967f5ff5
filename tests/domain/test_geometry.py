"""Tests for grid_moves.domain.geometry module."""

from __future__ import annotations

import pytest

from grid_moves.domain.geometry import (
    ORIGIN,
    Heading,
    Point,
    State,
    Turn,
    taxicab_distance,
)


class TestPoint:
    def test_value_equality_and_hashing(self) -> None:
        assert Point(3, -2) == Point(3, -2)
        assert len({Point(1, 1), Point(1, 1), Point(1, 2)}) == 2

    def test_shifted_returns_new_point(self) -> None:
        p = Point(1, 2)
        q = p.shifted(3, -4)
        assert q == Point(4, -2)
        assert p == Point(1, 2)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ORIGIN.x = 5  # type: ignore[misc]


class TestHeading:
    def test_right_is_clockwise(self) -> None:
        assert Heading.NORTH.right() is Heading.EAST
        assert Heading.EAST.right() is Heading.SOUTH
        assert Heading.SOUTH.right() is Heading.WEST
        assert Heading.WEST.right() is Heading.NORTH

    def test_left_is_counter_clockwise(self) -> None:
        assert Heading.NORTH.left() is Heading.WEST
        assert Heading.WEST.left() is Heading.SOUTH
        assert Heading.SOUTH.left() is Heading.EAST
        assert Heading.EAST.left() is Heading.NORTH

    @pytest.mark.parametrize("heading", list(Heading))
    @pytest.mark.parametrize("turn", list(Turn))
    def test_four_turns_return_to_start(self, heading: Heading, turn: Turn) -> None:
        result = heading
        for _ in range(4):
            result = result.turned(turn)
        assert result is heading

    @pytest.mark.parametrize("heading", list(Heading))
    def test_left_undoes_right(self, heading: Heading) -> None:
        assert heading.right().left() is heading

    def test_unit_vectors(self) -> None:
        assert (Heading.NORTH.dx, Heading.NORTH.dy) == (0, 1)
        assert (Heading.EAST.dx, Heading.EAST.dy) == (1, 0)
        assert (Heading.SOUTH.dx, Heading.SOUTH.dy) == (0, -1)
        assert (Heading.WEST.dx, Heading.WEST.dy) == (-1, 0)

    def test_from_name_is_case_insensitive(self) -> None:
        assert Heading.from_name("north") is Heading.NORTH
        assert Heading.from_name(" West ") is Heading.WEST

    def test_from_name_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="heading must be one of"):
            Heading.from_name("up")


class TestTaxicabDistance:
    def test_distance_to_self_is_zero(self) -> None:
        assert taxicab_distance(Point(7, -3), Point(7, -3)) == 0

    def test_symmetric(self) -> None:
        a, b = Point(-2, 5), Point(4, -1)
        assert taxicab_distance(a, b) == taxicab_distance(b, a) == 12

    def test_state_is_value_type(self) -> None:
        assert State(ORIGIN, Heading.NORTH) == State(Point(0, 0), Heading.NORTH)
