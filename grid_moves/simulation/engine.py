"""Lattice-walk engine: fold move instructions over an immutable walk state.

Two result modes share the same per-instruction transition (turn, then
move along the new heading):

- final-state mode applies each distance as one jump and reports where the
  walk ends;
- first-revisit mode decomposes each distance into unit steps and stops at
  the first cell that was already visited (the start cell included).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from functools import reduce

from grid_moves.domain.geometry import (
    ORIGIN,
    Heading,
    Point,
    State,
    Turn,
    taxicab_distance,
)
from grid_moves.domain.moves import MoveInstruction

logger = logging.getLogger(__name__)

START_STATE = State(position=ORIGIN, heading=Heading.NORTH)
"""Default walk start: the origin, facing north."""


def turn_heading(heading: Heading, turn: Turn) -> Heading:
    return heading.turned(turn)


def move_forward(point: Point, heading: Heading, distance: int) -> Point:
    """Shift *point* by *distance* cells along *heading* in one jump."""
    return point.shifted(heading.dx * distance, heading.dy * distance)


def apply_move(state: State, move: MoveInstruction) -> State:
    """Turn, then move forward along the new heading."""
    heading = turn_heading(state.heading, move.turn)
    return State(position=move_forward(state.position, heading, move.distance), heading=heading)


def run_moves(initial: State, moves: Sequence[MoveInstruction]) -> State:
    """Final-state mode: fold ``apply_move`` over *moves*."""
    return reduce(apply_move, moves, initial)


def walk_distance(moves: Sequence[MoveInstruction], start: State | None = None) -> int:
    """Taxicab distance between the start position and the final position."""
    initial = start if start is not None else START_STATE
    final = run_moves(initial, moves)
    logger.debug("Walked %d moves to %s", len(moves), final)
    return taxicab_distance(initial.position, final.position)


def walk_unit_steps(
    moves: Sequence[MoveInstruction], start: State | None = None
) -> Iterator[State]:
    """Yield the state after every single-cell step.

    Each instruction turns first and then contributes ``distance`` states;
    zero-distance instructions contribute none.
    """
    state = start if start is not None else START_STATE
    for move in moves:
        heading = turn_heading(state.heading, move.turn)
        for _ in range(move.distance):
            state = State(position=move_forward(state.position, heading, 1), heading=heading)
            yield state
        state = State(position=state.position, heading=heading)


def first_revisit(moves: Sequence[MoveInstruction], start: State | None = None) -> Point | None:
    """First-revisit mode: return the first cell entered twice, or ``None``.

    The start cell counts as visited before the first step.
    """
    initial = start if start is not None else START_STATE
    visited: set[Point] = {initial.position}
    for state in walk_unit_steps(moves, initial):
        if state.position in visited:
            logger.debug("First revisit at %s", state.position)
            return state.position
        visited.add(state.position)
    return None


def first_revisit_distance(
    moves: Sequence[MoveInstruction], start: State | None = None
) -> int | None:
    """Taxicab distance from the start to the first revisited cell, if any."""
    initial = start if start is not None else START_STATE
    revisit = first_revisit(moves, initial)
    if revisit is None:
        return None
    return taxicab_distance(initial.position, revisit)
