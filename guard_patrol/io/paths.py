"""Path construction helpers for patrol output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def baseline_path_log_path(out_dir: Path) -> Path:
    """Return path to the baseline patrol path Parquet file."""
    return logs_dir(out_dir) / "baseline_path.parquet"


def trials_log_path(out_dir: Path) -> Path:
    """Return path to the per-trial obstruction results Parquet file."""
    return logs_dir(out_dir) / "trials.parquet"


def summary_path(out_dir: Path) -> Path:
    """Return path to the run summary JSON file."""
    return out_dir / "summary.json"
