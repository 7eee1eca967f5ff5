"""Move-list parsing: ``"R2, L3"`` -> ordered ``MoveInstruction`` tuple."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from grid_moves.config.constants import MOVE_SEPARATOR
from grid_moves.domain.geometry import Turn


class ParseError(ValueError):
    """Raised when an input token cannot be turned into an instruction."""

    def __init__(self, message: str, token: str) -> None:
        super().__init__(message)
        self.token = token


@dataclass(frozen=True)
class MoveInstruction:
    """Turn first, then walk ``distance`` unit steps along the new heading."""

    turn: Turn
    distance: int

    def __post_init__(self) -> None:
        if self.distance < 0:
            raise ValueError("distance must be >= 0")

    def __str__(self) -> str:
        return f"{self.turn.value}{self.distance}"


def parse_move(token: str) -> MoveInstruction:
    """Parse one token such as ``"R12"``.

    The first character selects the turn (``L`` or ``R``, case-sensitive);
    the remainder must be a base-10 integer >= 0.
    """
    try:
        turn = Turn(token[:1])
    except ValueError:
        raise ParseError(f"Couldn't parse turn from: {token}", token) from None

    raw_distance = token[1:]
    # int() tolerates padding, digit separators and non-ASCII digits; a move token may not
    if (
        raw_distance != raw_distance.strip()
        or "_" in raw_distance
        or not raw_distance.isascii()
    ):
        raise ParseError(f"invalid digit found in: {token!r}", token)
    try:
        distance = int(raw_distance, 10)
    except ValueError as exc:
        raise ParseError(str(exc), token) from exc
    if distance < 0:
        raise ParseError(f"Negative distance in: {token}", token)

    return MoveInstruction(turn=turn, distance=distance)


def parse_moves(text: str) -> tuple[MoveInstruction, ...]:
    """Parse a comma-and-space separated move list, preserving order.

    Surrounding whitespace is trimmed first. Empty input yields ``()``.
    Tokens are split on the exact two-character separator ``", "``.
    """
    stripped = text.strip()
    if not stripped:
        return ()
    return tuple(parse_move(token) for token in stripped.split(MOVE_SEPARATOR))


def format_moves(moves: Iterable[MoveInstruction]) -> str:
    """Render instructions back to canonical ``"R2, L3"`` form."""
    return MOVE_SEPARATOR.join(str(move) for move in moves)
