"""Patrol engine: drives one guard across one grid until exit or loop.

Two run modes share the movement rule:

- ``run_escape`` records the ordered path and marks visited cells on the grid
  it is given (the caller owns that grid).
- ``detect_loop`` keeps a set of seen ``(position, facing)`` states and stops
  at the first repeat. A repeated position alone is not a loop: the guard may
  cross a cell on several headings without repeating behaviour.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from guard_patrol.config.constants import STEP_BUDGET_FACTOR
from guard_patrol.domain.agent import AgentState, advance
from guard_patrol.domain.errors import StepBudgetExceededError
from guard_patrol.domain.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Escaped:
    """The guard left the grid; ``path`` lists the in-grid states in order."""

    path: tuple[AgentState, ...] = ()


@dataclass(frozen=True)
class Looped:
    """The guard re-entered ``state`` after ``steps`` moves."""

    state: AgentState
    steps: int


PatrolOutcome: TypeAlias = Escaped | Looped


def default_step_budget(grid: Grid, factor: int = STEP_BUDGET_FACTOR) -> int:
    """Steps allowed per run: one more than the number of distinct guard states."""
    return factor * grid.width * grid.height + 1


def _resolve_budget(grid: Grid, step_budget: int | None) -> int:
    if step_budget is None:
        return default_step_budget(grid)
    if step_budget < 1:
        raise ValueError("step_budget must be >= 1")
    return step_budget


def _check_start(grid: Grid, start: AgentState) -> None:
    if not grid.in_bounds(start.position):
        raise ValueError(f"start position {start.position} is outside the grid")
    if not grid.is_passable(start.position):
        raise ValueError(f"start position {start.position} is not passable")


def run_escape(grid: Grid, start: AgentState, step_budget: int | None = None) -> Escaped:
    """Walk until the guard steps off-grid, marking each visited cell on *grid*.

    Raises :exc:`TrappedError` if the guard is boxed in and
    :exc:`StepBudgetExceededError` if it never leaves within the budget.
    """
    _check_start(grid, start)
    budget = _resolve_budget(grid, step_budget)
    path: list[AgentState] = []
    state = start
    while grid.in_bounds(state.position):
        if len(path) >= budget:
            raise StepBudgetExceededError(budget, state)
        path.append(state)
        grid.mark_visited(state.position, state.facing)
        state = advance(grid, state)
    logger.debug("guard escaped at %s after %d steps", state.position, len(path))
    return Escaped(path=tuple(path))


def detect_loop(grid: Grid, start: AgentState, step_budget: int | None = None) -> PatrolOutcome:
    """Walk until the guard exits or repeats a ``(position, facing)`` state.

    The grid is not modified. Only the outcome kind matters in this mode, so
    an escape carries an empty path.
    """
    _check_start(grid, start)
    budget = _resolve_budget(grid, step_budget)
    seen: set[AgentState] = set()
    state = start
    steps = 0
    while True:
        if state in seen:
            return Looped(state=state, steps=steps)
        if steps >= budget:
            raise StepBudgetExceededError(budget, state)
        seen.add(state)
        state = advance(grid, state)
        steps += 1
        if not grid.in_bounds(state.position):
            return Escaped()
