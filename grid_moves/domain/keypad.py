"""Keypad walk: a cursor on a fixed rectangular keypad with clamped moves.

Each input line moves the cursor one key per character; the key under the
cursor after the line is one character of the resulting code. The cursor
carries over from one line to the next.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from grid_moves.config.constants import KEYPAD_LAYOUT, KEYPAD_START_KEY
from grid_moves.domain.moves import ParseError


class KeypadDirection(Enum):
    """Cursor move. Value is the input letter; rows grow downwards."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


_DELTAS: dict[KeypadDirection, tuple[int, int]] = {
    KeypadDirection.UP: (0, -1),
    KeypadDirection.DOWN: (0, 1),
    KeypadDirection.LEFT: (-1, 0),
    KeypadDirection.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class KeypadPosition:
    """Column/row of a key on the keypad."""

    column: int
    row: int


@dataclass(frozen=True)
class Keypad:
    """Immutable rectangular key layout, rows listed top to bottom."""

    rows: tuple[str, ...] = KEYPAD_LAYOUT

    def __post_init__(self) -> None:
        if not self.rows or not self.rows[0]:
            raise ValueError("layout must contain at least one key")
        if any(len(row) != len(self.rows[0]) for row in self.rows):
            raise ValueError("layout rows must all have the same width")
        keys = "".join(self.rows)
        if len(set(keys)) != len(keys):
            raise ValueError("layout keys must be unique")

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def key_at(self, position: KeypadPosition) -> str:
        return self.rows[position.row][position.column]

    def position_of(self, key: str) -> KeypadPosition:
        if len(key) == 1:
            for row, labels in enumerate(self.rows):
                column = labels.find(key)
                if column >= 0:
                    return KeypadPosition(column=column, row=row)
        raise ValueError(f"Unknown key: {key}")


DEFAULT_KEYPAD = Keypad()


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def step_keypad(
    keypad: Keypad, position: KeypadPosition, direction: KeypadDirection
) -> KeypadPosition:
    """Move one key in *direction*; moves off the edge leave the cursor in place."""
    dx, dy = _DELTAS[direction]
    return KeypadPosition(
        column=_clamp(position.column + dx, 0, keypad.width - 1),
        row=_clamp(position.row + dy, 0, keypad.height - 1),
    )


def follow_line(
    keypad: Keypad, position: KeypadPosition, directions: Iterable[KeypadDirection]
) -> KeypadPosition:
    """Fold ``step_keypad`` over one line of directions."""
    for direction in directions:
        position = step_keypad(keypad, position, direction)
    return position


def parse_keypad_lines(text: str) -> tuple[tuple[KeypadDirection, ...], ...]:
    """Parse one direction tuple per input line.

    Lines are trimmed. A blank line between others is an empty move list and
    repeats the current key; a trailing newline adds no line. Any character
    other than ``U``, ``D``, ``L`` or ``R`` raises :class:`ParseError` naming
    the character and its line number.
    """
    lines: list[tuple[KeypadDirection, ...]] = []
    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        directions: list[KeypadDirection] = []
        for char in line:
            try:
                directions.append(KeypadDirection(char))
            except ValueError:
                raise ParseError(
                    f"Couldn't parse direction {char!r} on line {line_no}", char
                ) from None
        lines.append(tuple(directions))
    return tuple(lines)


def derive_code(
    lines: Sequence[Sequence[KeypadDirection]],
    keypad: Keypad = DEFAULT_KEYPAD,
    start_key: str = KEYPAD_START_KEY,
) -> str:
    """Return the code formed by the key under the cursor after each line."""
    position = keypad.position_of(start_key)
    keys: list[str] = []
    for directions in lines:
        position = follow_line(keypad, position, directions)
        keys.append(keypad.key_at(position))
    return "".join(keys)
