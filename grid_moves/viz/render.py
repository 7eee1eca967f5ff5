"""Static rendering of lattice walks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

import matplotlib

from grid_moves.config.constants import PLOT_DPI

PATH_COLOR = "#3b82f6"
START_COLOR = "#22c55e"
END_COLOR = "#111827"
REVISIT_COLOR = "#ef4444"

_FIGSIZE = (6.0, 6.0)
_MARKER_SIZE = 60
_LINE_WIDTH = 1.2


def render_walk_path(
    columns: Mapping[str, Sequence[int | str | bool]],
    output_path: Path,
    *,
    title: str | None = None,
) -> Path:
    """Draw a walk trace (``collect_trace_columns`` output) to an image file.

    Start, final and first-revisit cells are marked. Returns *output_path*.
    """
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    xs = list(columns["x"])
    ys = list(columns["y"])
    if not xs:
        raise ValueError("trace must contain at least the start state")
    revisits = [i for i, flag in enumerate(columns["revisit"]) if flag]

    fig, ax = plt.subplots(figsize=_FIGSIZE)
    try:
        ax.plot(xs, ys, color=PATH_COLOR, linewidth=_LINE_WIDTH, zorder=1)
        ax.scatter([xs[0]], [ys[0]], s=_MARKER_SIZE, color=START_COLOR, label="start", zorder=2)
        ax.scatter([xs[-1]], [ys[-1]], s=_MARKER_SIZE, color=END_COLOR, label="end", zorder=2)
        if revisits:
            first = revisits[0]
            ax.scatter(
                [xs[first]],
                [ys[first]],
                s=_MARKER_SIZE,
                color=REVISIT_COLOR,
                marker="X",
                label="first revisit",
                zorder=3,
            )
        ax.set_aspect("equal", adjustable="datalim")
        ax.grid(True, linewidth=0.3)
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.legend(loc="best", fontsize=8)
        if title:
            ax.set_title(title)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=PLOT_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path
