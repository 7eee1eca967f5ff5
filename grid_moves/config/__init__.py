"""Configuration layer: constants and typed config dataclasses."""

from grid_moves.config.constants import (
    KEYPAD_LAYOUT,
    KEYPAD_START_KEY,
    MOVE_SEPARATOR,
    ORIGIN_X,
    ORIGIN_Y,
    PLOT_DPI,
    START_HEADING_NAME,
)
from grid_moves.config.types import KeypadConfig, WalkConfig

__all__ = [
    "KEYPAD_LAYOUT",
    "KEYPAD_START_KEY",
    "KeypadConfig",
    "MOVE_SEPARATOR",
    "ORIGIN_X",
    "ORIGIN_Y",
    "PLOT_DPI",
    "START_HEADING_NAME",
    "WalkConfig",
]
