"""Configuration dataclasses for lattice-walk and keypad runs.

Both dataclasses are frozen and validate themselves in ``__post_init__`` so
that an invalid value is rejected before any simulation starts.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from grid_moves.config.constants import (
    KEYPAD_LAYOUT,
    KEYPAD_START_KEY,
    ORIGIN_X,
    ORIGIN_Y,
    START_HEADING_NAME,
)
from grid_moves.domain.geometry import Heading

__all__ = [
    "KeypadConfig",
    "WalkConfig",
]


@dataclass(frozen=True)
class WalkConfig:
    """Starting state and output knobs for a lattice walk."""

    start_x: int = ORIGIN_X
    start_y: int = ORIGIN_Y
    heading: Heading = Heading.from_name(START_HEADING_NAME)
    out_dir: Path | None = None
    plot: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.heading, Heading):
            raise ValueError("heading must be a Heading")
        if self.plot and self.out_dir is None:
            raise ValueError("plot requires out_dir")


@dataclass(frozen=True)
class KeypadConfig:
    """Keypad layout and starting key."""

    layout: tuple[str, ...] = KEYPAD_LAYOUT
    start_key: str = KEYPAD_START_KEY

    def __post_init__(self) -> None:
        from grid_moves.domain.keypad import Keypad

        keypad = Keypad(rows=self.layout)
        if len(self.start_key) != 1 or self.start_key not in set("".join(keypad.rows)):
            raise ValueError(f"start_key {self.start_key!r} is not on the layout")
