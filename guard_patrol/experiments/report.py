"""End-to-end patrol analysis: baseline run followed by the obstruction search."""

from __future__ import annotations

from dataclasses import dataclass

from guard_patrol.config.types import SearchConfig
from guard_patrol.domain.agent import AgentState
from guard_patrol.domain.grid import Grid
from guard_patrol.experiments.baseline import BaselineResult, run_baseline
from guard_patrol.experiments.obstruction_search import (
    ObstructionSearchResult,
    count_loop_inducing_obstructions,
)
from guard_patrol.simulation.engine import default_step_budget


@dataclass(frozen=True)
class PatrolReport:
    """Both answers for one board plus the inputs that produced them."""

    grid: Grid
    start: AgentState
    baseline: BaselineResult
    search: ObstructionSearchResult

    @property
    def visited_count(self) -> int:
        return self.baseline.distinct_visited_count

    @property
    def loop_count(self) -> int:
        return self.search.count


def solve(grid: Grid, start: AgentState, config: SearchConfig | None = None) -> PatrolReport:
    """Run the baseline to completion, then search obstructions along its path."""
    search_config = config or SearchConfig()
    baseline = run_baseline(
        grid,
        start,
        step_budget=default_step_budget(grid, factor=search_config.step_budget_factor),
    )
    search = count_loop_inducing_obstructions(grid, start, baseline.path, config=search_config)
    return PatrolReport(grid=grid, start=start, baseline=baseline, search=search)
