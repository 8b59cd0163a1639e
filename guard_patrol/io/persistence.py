"""Parquet/JSON persistence for a completed patrol report."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from guard_patrol.experiments.report import PatrolReport
from guard_patrol.io.paths import (
    baseline_path_log_path,
    logs_dir,
    summary_path,
    trials_log_path,
)
from guard_patrol.io.schemas import PATH_SCHEMA, SUMMARY_SCHEMA_VERSION, TRIAL_SCHEMA


def build_summary(report: PatrolReport) -> dict[str, object]:
    """JSON-serialisable summary of both answers and the board they came from."""
    return {
        "schema_version": SUMMARY_SCHEMA_VERSION,
        "grid_width": report.grid.width,
        "grid_height": report.grid.height,
        "start": {
            "row": report.start.position[0],
            "col": report.start.position[1],
            "facing": report.start.facing.value,
        },
        "visited": report.visited_count,
        "path_length": len(report.baseline.path),
        "candidates": len(report.search.trials),
        "loop_positions": report.loop_count,
        "outcomes": {
            outcome: sum(1 for t in report.search.trials if t.outcome.value == outcome)
            for outcome in sorted({t.outcome.value for t in report.search.trials})
        },
    }


def path_table(report: PatrolReport) -> pa.Table:
    columns: dict[str, list[int | str]] = {"step": [], "row": [], "col": [], "facing": []}
    for step, state in enumerate(report.baseline.path):
        columns["step"].append(step)
        columns["row"].append(state.position[0])
        columns["col"].append(state.position[1])
        columns["facing"].append(state.facing.value)
    return pa.Table.from_pydict(columns, schema=PATH_SCHEMA)


def trials_table(report: PatrolReport) -> pa.Table:
    rows = [
        {
            "row": trial.position[0],
            "col": trial.position[1],
            "outcome": trial.outcome.value,
            "looped": trial.looped,
            "steps": trial.steps,
        }
        for trial in report.search.trials
    ]
    return pa.Table.from_pylist(rows, schema=TRIAL_SCHEMA)


def write_report(report: PatrolReport, out_dir: Path) -> dict[str, object]:
    """Persist path/trial Parquet logs and ``summary.json``; return the summary."""
    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    pq.write_table(path_table(report), baseline_path_log_path(out_dir))
    pq.write_table(trials_table(report), trials_log_path(out_dir))
    summary = build_summary(report)
    summary_path(out_dir).write_text(json.dumps(summary, ensure_ascii=False, indent=2))
    return summary
