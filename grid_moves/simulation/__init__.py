"""Simulation engine: walk folding, first-revisit detection, and trace persistence."""

from grid_moves.simulation.engine import (
    START_STATE,
    apply_move,
    first_revisit,
    first_revisit_distance,
    move_forward,
    run_moves,
    turn_heading,
    walk_distance,
    walk_unit_steps,
)
from grid_moves.simulation.persistence import collect_trace_columns, write_trace

__all__ = [
    "START_STATE",
    "apply_move",
    "collect_trace_columns",
    "first_revisit",
    "first_revisit_distance",
    "move_forward",
    "run_moves",
    "turn_heading",
    "walk_distance",
    "walk_unit_steps",
    "write_trace",
]
