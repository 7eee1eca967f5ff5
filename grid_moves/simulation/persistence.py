"""Walk-trace collection and Parquet persistence."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from grid_moves.domain.geometry import Point, State
from grid_moves.domain.moves import MoveInstruction
from grid_moves.io.schemas import TRACE_SCHEMA
from grid_moves.simulation.engine import START_STATE, walk_unit_steps


def collect_trace_columns(
    moves: Sequence[MoveInstruction], start: State | None = None
) -> dict[str, list[int | str | bool]]:
    """Build column lists for every unit step of the walk, start state at step 0.

    Only the first cell entered a second time is flagged in ``revisit``.
    """
    initial = start if start is not None else START_STATE
    columns: dict[str, list[int | str | bool]] = {name: [] for name in TRACE_SCHEMA.names}
    visited: set[Point] = set()
    revisit_seen = False

    states = [initial, *walk_unit_steps(moves, initial)]
    for step, state in enumerate(states):
        is_revisit = not revisit_seen and state.position in visited
        revisit_seen = revisit_seen or is_revisit
        visited.add(state.position)
        columns["step"].append(step)
        columns["x"].append(state.position.x)
        columns["y"].append(state.position.y)
        columns["heading"].append(state.heading.name)
        columns["revisit"].append(is_revisit)
    return columns


def write_trace(
    moves: Sequence[MoveInstruction], trace_path: Path, start: State | None = None
) -> int:
    """Write the unit-step trace to *trace_path*; returns the row count."""
    columns = collect_trace_columns(moves, start)
    table = pa.Table.from_pydict(columns, schema=TRACE_SCHEMA)
    trace_path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, trace_path)
    return table.num_rows
