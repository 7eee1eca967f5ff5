"""I/O layer: Parquet schemas and output path conventions."""

from grid_moves.io.paths import logs_dir, plots_dir, walk_plot_path, walk_trace_path
from grid_moves.io.schemas import TRACE_SCHEMA, TRACE_SCHEMA_VERSION

__all__ = [
    "TRACE_SCHEMA",
    "TRACE_SCHEMA_VERSION",
    "logs_dir",
    "plots_dir",
    "walk_plot_path",
    "walk_trace_path",
]
