"""Centralized domain constants for the grid-walk solvers.

Values shared by the parser, the simulation engine, the keypad and the CLI
are defined here. Consuming modules should import from this module rather
than defining their own inline literals.
"""

from __future__ import annotations

MOVE_SEPARATOR = ", "
"""Literal delimiter between move tokens (``"R2, L3"``)."""

ORIGIN_X = 0
"""Default starting x coordinate."""

ORIGIN_Y = 0
"""Default starting y coordinate."""

START_HEADING_NAME = "north"
"""Default starting heading, as accepted by ``--heading``."""

KEYPAD_LAYOUT: tuple[str, ...] = ("123", "456", "789")
"""Default keypad rows, top to bottom."""

KEYPAD_START_KEY = "5"
"""Key under the cursor before the first keypad line."""

PLOT_DPI = 150
"""Resolution of rendered walk-path figures."""
