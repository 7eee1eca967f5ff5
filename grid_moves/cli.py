"""CLI entrypoint for the grid-walk solvers.

This module owns argument parsing, config-file resolution and output
formatting. All walk logic lives in:

- ``grid_moves.domain``            – geometry, move parsing, keypad model
- ``grid_moves.simulation.engine`` – final-state and first-revisit folds
- ``grid_moves.simulation.persistence`` – Parquet walk traces
- ``grid_moves.viz.render``        – walk-path figures
"""

from __future__ import annotations

import argparse
import json
import logging
import math
from pathlib import Path

from grid_moves.config.constants import (
    KEYPAD_LAYOUT,
    KEYPAD_START_KEY,
    ORIGIN_X,
    ORIGIN_Y,
    START_HEADING_NAME,
)
from grid_moves.config.types import KeypadConfig, WalkConfig
from grid_moves.domain.geometry import Heading, Point, State, taxicab_distance
from grid_moves.domain.keypad import Keypad, derive_code, parse_keypad_lines
from grid_moves.domain.moves import MoveInstruction, ParseError, format_moves, parse_moves
from grid_moves.io.paths import walk_plot_path, walk_trace_path
from grid_moves.simulation.engine import first_revisit, walk_distance
from grid_moves.simulation.persistence import collect_trace_columns, write_trace
from grid_moves.viz.render import render_walk_path

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Value coercion helpers (CLI > config file > default)
# ---------------------------------------------------------------------------


def _as_int(raw: object, key: str) -> int:
    """Accept an int or an integral, finite float (JSON has no int/float split)."""
    if isinstance(raw, float) and math.isfinite(raw) and raw.is_integer():
        return int(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    raise ValueError(f"{key} must be an integer value, got {raw!r}")


def _as_bool(raw: object, key: str) -> bool:
    if isinstance(raw, bool):
        return raw
    raise ValueError(f"{key} must be true or false, got {raw!r}")


def _as_str(raw: object, key: str) -> str:
    if isinstance(raw, (str, Path)):
        return str(raw)
    raise ValueError(f"{key} must be a string, got {raw!r}")


def _pick(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """Command line wins over the config file, which wins over *default*."""
    return cli_val if cli_val is not None else file_cfg.get(key, default)


def _parse_layout(raw: object) -> tuple[str, ...]:
    """Parse a keypad layout given as ``"123,456,789"`` or a JSON list of rows."""
    if isinstance(raw, (list, tuple)):
        rows = [_as_str(row, "layout") for row in raw]
    else:
        rows = [part.strip() for part in _as_str(raw, "layout").split(",")]
    if not rows or any(not row for row in rows):
        raise ValueError("layout rows must not be empty")
    return tuple(rows)


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        loaded = json.loads(path.read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return loaded


def _read_input(parser: argparse.ArgumentParser, path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        parser.error(f"Unable to read input file {path}: {exc.strerror or exc}")


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------


def _resolve_walk_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> WalkConfig:
    start_x = _as_int(_pick(args.start_x, "start_x", file_cfg, ORIGIN_X), "start_x")
    start_y = _as_int(_pick(args.start_y, "start_y", file_cfg, ORIGIN_Y), "start_y")
    heading_raw = _as_str(
        _pick(args.heading, "heading", file_cfg, START_HEADING_NAME), "heading"
    )
    out_dir_raw = _pick(args.out_dir, "out_dir", file_cfg, None)
    plot = _as_bool(_pick(args.plot, "plot", file_cfg, False), "plot")
    return WalkConfig(
        start_x=start_x,
        start_y=start_y,
        heading=Heading.from_name(heading_raw),
        out_dir=None if out_dir_raw is None else Path(_as_str(out_dir_raw, "out_dir")),
        plot=plot,
    )


def _resolve_keypad_config(
    args: argparse.Namespace, file_cfg: dict[str, object]
) -> KeypadConfig:
    start_key = _as_str(
        _pick(args.start_key, "start_key", file_cfg, KEYPAD_START_KEY), "start_key"
    )
    layout = _parse_layout(_pick(args.layout, "layout", file_cfg, KEYPAD_LAYOUT))
    return KeypadConfig(layout=layout, start_key=start_key)


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", type=Path, help="Text file holding the puzzle input")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )


def _add_walk_arguments(parser: argparse.ArgumentParser) -> None:
    _add_common_arguments(parser)
    parser.add_argument("--start-x", type=int, default=None)
    parser.add_argument("--start-y", type=int, default=None)
    parser.add_argument(
        "--heading",
        type=str,
        choices=[heading.name.lower() for heading in Heading],
        default=None,
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Write the unit-step walk trace under this directory",
    )
    parser.add_argument(
        "--plot",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Also render the walk path (requires --out-dir)",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="grid-moves", description="Solve lattice-walk and keypad puzzles"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    distance = subparsers.add_parser(
        "distance", help="Taxicab distance from the start to the final position"
    )
    _add_walk_arguments(distance)

    revisit = subparsers.add_parser(
        "revisit", help="Taxicab distance from the start to the first cell visited twice"
    )
    _add_walk_arguments(revisit)

    keypad = subparsers.add_parser("keypad", help="Derive a keypad code from move lines")
    _add_common_arguments(keypad)
    keypad.add_argument("--start-key", type=str, default=None)
    keypad.add_argument(
        "--layout",
        type=str,
        default=None,
        help="Comma-separated keypad rows, top to bottom (default 123,456,789)",
    )
    return parser


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def _export_artifacts(
    config: WalkConfig, moves: tuple[MoveInstruction, ...], start: State
) -> dict[str, str]:
    """Write trace (and optional plot) when an output directory is configured."""
    if config.out_dir is None:
        return {}
    trace_path = walk_trace_path(config.out_dir)
    rows = write_trace(moves, trace_path, start)
    logger.info("Wrote %d trace rows to %s", rows, trace_path)
    artifacts = {"trace": str(trace_path)}
    if config.plot:
        plot_path = render_walk_path(
            collect_trace_columns(moves, start),
            walk_plot_path(config.out_dir),
            title=format_moves(moves) if len(moves) <= 8 else f"{len(moves)} moves",
        )
        logger.info("Rendered walk path to %s", plot_path)
        artifacts["plot"] = str(plot_path)
    return artifacts


def _handle_walk(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> dict[str, object]:
    file_cfg = _load_config_file(parser, args.config)
    try:
        config = _resolve_walk_config(args, file_cfg)
        moves = parse_moves(_read_input(parser, args.input))
    except ParseError as exc:
        parser.error(f"Unable to parse moves: {exc}")
    except ValueError as exc:
        parser.error(str(exc))

    start = State(position=Point(config.start_x, config.start_y), heading=config.heading)
    summary: dict[str, object] = {"mode": args.command, "moves": len(moves)}
    if args.command == "distance":
        summary["distance"] = walk_distance(moves, start)
    else:
        revisit = first_revisit(moves, start)
        if revisit is None:
            logger.warning("No cell was visited twice")
            summary["distance"] = None
            summary["revisit"] = None
        else:
            summary["distance"] = taxicab_distance(start.position, revisit)
            summary["revisit"] = [revisit.x, revisit.y]
    summary.update(_export_artifacts(config, moves, start))
    return summary


def _handle_keypad(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> dict[str, object]:
    file_cfg = _load_config_file(parser, args.config)
    try:
        config = _resolve_keypad_config(args, file_cfg)
        lines = parse_keypad_lines(_read_input(parser, args.input))
        code = derive_code(lines, Keypad(rows=config.layout), config.start_key)
    except ParseError as exc:
        parser.error(f"Unable to parse keypad moves: {exc}")
    except ValueError as exc:
        parser.error(str(exc))

    return {"mode": "keypad", "lines": len(lines), "code": code}


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json`` on every subcommand. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "keypad":
        summary = _handle_keypad(args, parser)
    else:
        summary = _handle_walk(args, parser)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
