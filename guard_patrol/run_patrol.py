"""CLI entrypoint for patrol analysis.

This module owns CLI argument parsing and dispatch. All domain logic lives in
the extracted modules:

- ``guard_patrol.io.loader``        – board file parsing
- ``guard_patrol.config``           – configuration dataclasses
- ``guard_patrol.experiments``      – baseline run and obstruction search
- ``guard_patrol.io.persistence``   – Parquet/JSON artifacts
- ``guard_patrol.viz``              – ASCII and matplotlib rendering
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from guard_patrol.config.constants import DEFAULT_OUT_DIR, STEP_BUDGET_FACTOR
from guard_patrol.config.types import ExecutorKind, RunConfig, SearchConfig
from guard_patrol.domain.errors import MalformedGridError, PatrolError
from guard_patrol.experiments.report import PatrolReport, solve
from guard_patrol.io.loader import load_board
from guard_patrol.io.persistence import build_summary, write_report
from guard_patrol.viz.render import render_patrol_figure
from guard_patrol.viz.text import render_board

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _pick(
    cli_val: object, key: str, file_cfg: dict[str, object], default: object = None
) -> object:
    """CLI value if given, else the config-file value, else *default*."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _as_bool(raw: object, key: str) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and raw.strip().lower() in {"true", "false"}:
        return raw.strip().lower() == "true"
    raise ValueError(f"{key} must be true or false")


def _as_int(raw: object, key: str) -> int:
    """Accept ints and integral strings; booleans are rejected."""
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError(f"{key} must be an integer, got {raw!r}")
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc


def _as_path(raw: object, key: str) -> Path:
    if not isinstance(raw, (str, Path)):
        raise ValueError(f"{key} must be a path string, got {raw!r}")
    return Path(raw)


def _as_executor(raw: object) -> ExecutorKind:
    valid = ", ".join(kind.value for kind in ExecutorKind)
    try:
        return ExecutorKind(raw)
    except ValueError as exc:
        raise ValueError(f"executor must be one of {valid}") from exc


def _as_log_level(raw: object) -> str:
    level = str(raw).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Simulate a guard patrol and count loop-inducing obstructions"
    )
    parser.add_argument("input", type=Path, nargs="?", default=None, help="Board file")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument(
        "--executor",
        type=str,
        choices=[kind.value for kind in ExecutorKind],
        default=None,
    )
    parser.add_argument("--step-budget-factor", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--write-artifacts", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--render", type=Path, default=None, help="Write a PNG of the board")
    parser.add_argument("--print-board", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default=None,
    )
    return parser


def _resolve_run_config(
    args: argparse.Namespace, file_cfg: dict[str, object]
) -> RunConfig | None:
    raw_input = _pick(args.input, "input", file_cfg)
    if raw_input is None:
        return None
    raw_workers = _pick(args.workers, "workers", file_cfg)
    raw_render = _pick(args.render, "render", file_cfg)
    search = SearchConfig(
        max_workers=None if raw_workers is None else _as_int(raw_workers, "workers"),
        executor=_as_executor(
            _pick(args.executor, "executor", file_cfg, ExecutorKind.PROCESS.value)
        ),
        step_budget_factor=_as_int(
            _pick(args.step_budget_factor, "step_budget_factor", file_cfg, STEP_BUDGET_FACTOR),
            "step_budget_factor",
        ),
    )
    return RunConfig(
        input_path=_as_path(raw_input, "input"),
        out_dir=_as_path(_pick(args.out_dir, "out_dir", file_cfg, DEFAULT_OUT_DIR), "out_dir"),
        search=search,
        render_path=None if raw_render is None else _as_path(raw_render, "render"),
        print_board=_as_bool(
            _pick(args.print_board, "print_board", file_cfg, False), "print_board"
        ),
        write_artifacts=_as_bool(
            _pick(args.write_artifacts, "write_artifacts", file_cfg, True), "write_artifacts"
        ),
    )


def run(config: RunConfig) -> PatrolReport:
    """Load the board, solve it, and emit the requested artifacts."""
    grid, start = load_board(config.input_path)
    logger.info("loaded %dx%d board, guard at %s", grid.width, grid.height, start.position)
    if config.print_board:
        print(render_board(grid, start))
    report = solve(grid, start, config=config.search)
    if config.print_board:
        print(render_board(report.baseline.visited_grid))
    if config.write_artifacts:
        write_report(report, config.out_dir)
    if config.render_path is not None:
        render_patrol_figure(
            report.baseline.visited_grid,
            config.render_path,
            start=start,
            loop_positions=report.search.positions,
            title=f"visited={report.visited_count}  loop obstructions={report.loop_count}",
        )
    return report


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for patrol analysis.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        log_level = _as_log_level(_pick(args.log_level, "log_level", file_cfg, "WARNING"))
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        run_config = _resolve_run_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    if run_config is None:
        parser.error("a board file is required (positional argument or 'input' in config)")

    try:
        report = run(run_config)
    except FileNotFoundError:
        parser.error(f"Board file not found: {run_config.input_path}")
    except MalformedGridError as exc:
        parser.error(f"Malformed board: {exc}")
    except PatrolError as exc:
        parser.error(f"Baseline patrol failed: {exc}")

    print(json.dumps(build_summary(report), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
