"""Parquet schema for walk-trace artifacts."""

from __future__ import annotations

import pyarrow as pa

TRACE_SCHEMA_VERSION = 1

TRACE_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("heading", pa.string()),
        ("revisit", pa.bool_()),
    ],
    metadata={"schema_version": str(TRACE_SCHEMA_VERSION)},
)
