"""Domain layer: lattice geometry, move parsing, and the keypad model."""

from grid_moves.domain.geometry import (
    ORIGIN,
    Heading,
    Point,
    State,
    Turn,
    taxicab_distance,
)
from grid_moves.domain.keypad import (
    DEFAULT_KEYPAD,
    Keypad,
    KeypadDirection,
    KeypadPosition,
    derive_code,
    follow_line,
    parse_keypad_lines,
    step_keypad,
)
from grid_moves.domain.moves import (
    MoveInstruction,
    ParseError,
    format_moves,
    parse_move,
    parse_moves,
)

__all__ = [
    "DEFAULT_KEYPAD",
    "Heading",
    "Keypad",
    "KeypadDirection",
    "KeypadPosition",
    "MoveInstruction",
    "ORIGIN",
    "ParseError",
    "Point",
    "State",
    "Turn",
    "derive_code",
    "follow_line",
    "format_moves",
    "parse_keypad_lines",
    "parse_move",
    "parse_moves",
    "step_keypad",
    "taxicab_distance",
]
