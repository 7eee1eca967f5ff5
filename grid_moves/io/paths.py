"""Path construction helpers for walk output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def plots_dir(out_dir: Path) -> Path:
    """Return path to the plots subdirectory within an output directory."""
    return out_dir / "plots"


def walk_trace_path(out_dir: Path) -> Path:
    """Return path to the walk trace Parquet file."""
    return logs_dir(out_dir) / "walk_trace.parquet"


def walk_plot_path(out_dir: Path) -> Path:
    """Return path to the rendered walk-path figure."""
    return plots_dir(out_dir) / "walk_path.png"
