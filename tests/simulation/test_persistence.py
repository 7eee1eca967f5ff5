"""Tests for grid_moves.simulation.persistence module."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from grid_moves.domain.moves import parse_moves
from grid_moves.io.paths import walk_trace_path
from grid_moves.io.schemas import TRACE_SCHEMA
from grid_moves.simulation.persistence import collect_trace_columns, write_trace


class TestCollectTraceColumns:
    def test_start_state_is_step_zero(self) -> None:
        columns = collect_trace_columns(parse_moves("R2, L3"))
        assert columns["step"] == [0, 1, 2, 3, 4, 5]
        assert (columns["x"][0], columns["y"][0], columns["heading"][0]) == (0, 0, "NORTH")
        assert (columns["x"][-1], columns["y"][-1], columns["heading"][-1]) == (2, 3, "NORTH")
        assert not any(columns["revisit"])

    def test_only_first_revisit_flagged(self) -> None:
        columns = collect_trace_columns(parse_moves("R8, R4, R4, R8"))
        assert len(columns["step"]) == 25
        flagged = [i for i, flag in enumerate(columns["revisit"]) if flag]
        assert flagged == [20]
        assert (columns["x"][20], columns["y"][20]) == (4, 0)

    def test_empty_walk_has_start_row(self) -> None:
        columns = collect_trace_columns(())
        assert columns["step"] == [0]

    def test_columns_match_schema(self) -> None:
        assert list(collect_trace_columns(()).keys()) == TRACE_SCHEMA.names


class TestWriteTrace:
    def test_writes_parquet(self, tmp_path: Path) -> None:
        path = walk_trace_path(tmp_path)
        rows = write_trace(parse_moves("R2, L3"), path)
        assert rows == 6
        assert path.exists()
        table = pq.read_table(path)
        assert table.schema.names == TRACE_SCHEMA.names
        assert table.column("x").to_pylist() == [0, 1, 2, 2, 2, 2]
        assert table.column("y").to_pylist() == [0, 0, 0, 1, 2, 3]

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "trace.parquet"
        write_trace(parse_moves("L1"), path)
        assert path.exists()
