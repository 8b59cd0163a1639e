"""Experiments layer: baseline patrol, obstruction search, and the combined report."""

from guard_patrol.experiments.baseline import BaselineResult, run_baseline
from guard_patrol.experiments.obstruction_search import (
    ObstructionSearchResult,
    TrialOutcome,
    TrialResult,
    candidate_positions,
    count_loop_inducing_obstructions,
    run_trial,
)
from guard_patrol.experiments.report import PatrolReport, solve

__all__ = [
    "BaselineResult",
    "ObstructionSearchResult",
    "PatrolReport",
    "TrialOutcome",
    "TrialResult",
    "candidate_positions",
    "count_loop_inducing_obstructions",
    "run_baseline",
    "run_trial",
    "solve",
]
