"""Obstruction search: which single inserted obstacle traps the guard in a loop.

One trial per distinct baseline-path position (never the start). Each trial
owns a private grid copy and seen-state set; trials run on a bounded
``concurrent.futures`` pool and their results are drained by this module
alone, so the aggregate is a set union independent of completion order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum

from guard_patrol.config.types import ExecutorKind, SearchConfig
from guard_patrol.domain.agent import AgentState
from guard_patrol.domain.errors import StepBudgetExceededError, TrappedError
from guard_patrol.domain.grid import SYNTHETIC_OBSTACLE_CELL, Grid, Position
from guard_patrol.simulation.engine import Looped, default_step_budget, detect_loop

logger = logging.getLogger(__name__)


class TrialOutcome(Enum):
    """Result of a single obstruction trial."""

    LOOPED = "looped"
    ESCAPED = "escaped"
    TRAPPED = "trapped"
    BUDGET_EXCEEDED = "budget_exceeded"


@dataclass(frozen=True)
class TrialResult:
    """Outcome of inserting one synthetic obstacle at ``position``."""

    position: Position
    outcome: TrialOutcome
    steps: int | None = None

    @property
    def looped(self) -> bool:
        return self.outcome == TrialOutcome.LOOPED


@dataclass(frozen=True)
class ObstructionSearchResult:
    """Loop-inducing positions plus every per-trial result, sorted by position."""

    positions: frozenset[Position]
    trials: tuple[TrialResult, ...]

    @property
    def count(self) -> int:
        return len(self.positions)


def candidate_positions(path: Iterable[AgentState], start: AgentState) -> list[Position]:
    """Distinct path positions in first-visit order, excluding the start cell.

    The start is excluded by position, whatever facing the path revisits it with.
    """
    seen: set[Position] = {start.position}
    candidates: list[Position] = []
    for state in path:
        if state.position not in seen:
            seen.add(state.position)
            candidates.append(state.position)
    return candidates


def run_trial(grid: Grid, start: AgentState, position: Position, step_budget: int) -> TrialResult:
    """Insert a synthetic obstacle at *position* on a private copy and look for a loop.

    Trapped and budget failures stay local to this trial: they are logged and
    reported as non-looping outcomes.
    """
    if position == start.position:
        raise ValueError("cannot place an obstruction on the guard start position")
    trial_grid = grid.copy()
    trial_grid.set(position, SYNTHETIC_OBSTACLE_CELL)
    try:
        outcome = detect_loop(trial_grid, start, step_budget=step_budget)
    except TrappedError as exc:
        logger.warning("trial %s: guard trapped at %s", position, exc.state.position)
        return TrialResult(position=position, outcome=TrialOutcome.TRAPPED)
    except StepBudgetExceededError as exc:
        logger.warning("trial %s: step budget %d exhausted", position, exc.budget)
        return TrialResult(position=position, outcome=TrialOutcome.BUDGET_EXCEEDED)
    if isinstance(outcome, Looped):
        return TrialResult(position=position, outcome=TrialOutcome.LOOPED, steps=outcome.steps)
    return TrialResult(position=position, outcome=TrialOutcome.ESCAPED)


def _make_executor(config: SearchConfig, n_candidates: int) -> Executor:
    workers = max(1, min(config.resolved_workers(), n_candidates))
    if config.executor == ExecutorKind.THREAD:
        return ThreadPoolExecutor(max_workers=workers)
    return ProcessPoolExecutor(max_workers=workers)


def count_loop_inducing_obstructions(
    grid: Grid,
    start: AgentState,
    path: Iterable[AgentState],
    config: SearchConfig | None = None,
) -> ObstructionSearchResult:
    """Evaluate every candidate obstruction and collect those that cause a loop.

    Waits for every submitted trial before returning; a trial that raises
    anything other than a trapped/budget failure propagates.
    """
    search_config = config or SearchConfig()
    candidates = candidate_positions(path, start)
    step_budget = default_step_budget(grid, factor=search_config.step_budget_factor)
    if not candidates:
        return ObstructionSearchResult(positions=frozenset(), trials=())

    logger.info(
        "evaluating %d candidate obstructions with up to %d %s workers",
        len(candidates),
        search_config.resolved_workers(),
        search_config.executor.value,
    )
    results: list[TrialResult] = []
    with _make_executor(search_config, len(candidates)) as executor:
        futures = [
            executor.submit(run_trial, grid, start, position, step_budget)
            for position in candidates
        ]
        for future in as_completed(futures):
            results.append(future.result())

    looped = frozenset(r.position for r in results if r.looped)
    logger.info("%d of %d obstructions induce a loop", len(looped), len(results))
    return ObstructionSearchResult(
        positions=looped,
        trials=tuple(sorted(results, key=lambda r: r.position)),
    )
