"""Visualization layer: walk-path rendering."""

from grid_moves.viz.render import render_walk_path

__all__ = ["render_walk_path"]
