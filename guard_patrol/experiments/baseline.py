"""Baseline patrol: the unobstructed escape run that seeds the obstruction search."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from guard_patrol.domain.agent import AgentState
from guard_patrol.domain.grid import Grid
from guard_patrol.simulation.engine import run_escape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaselineResult:
    """Distinct-cell count and ordered path of the unobstructed patrol."""

    distinct_visited_count: int
    path: tuple[AgentState, ...]
    visited_grid: Grid


def run_baseline(grid: Grid, start: AgentState, step_budget: int | None = None) -> BaselineResult:
    """Run escape-and-record mode on a private copy of *grid*.

    The input grid is left untouched, so repeated calls on the same inputs
    return identical results.
    """
    visited_grid = grid.copy()
    outcome = run_escape(visited_grid, start, step_budget=step_budget)
    count = visited_grid.visited_count()
    logger.info("baseline patrol visited %d cells in %d steps", count, len(outcome.path))
    return BaselineResult(
        distinct_visited_count=count,
        path=outcome.path,
        visited_grid=visited_grid,
    )
