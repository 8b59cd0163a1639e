"""Tests for guard_patrol.experiments.obstruction_search."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from guard_patrol.config.types import ExecutorKind, SearchConfig
from guard_patrol.domain.agent import AgentState
from guard_patrol.domain.facing import Facing
from guard_patrol.experiments.baseline import run_baseline
from guard_patrol.experiments.obstruction_search import (
    TrialOutcome,
    TrialResult,
    candidate_positions,
    count_loop_inducing_obstructions,
    run_trial,
)
from guard_patrol.io.loader import parse_board
from guard_patrol.simulation.engine import default_step_budget

THREADS_1 = SearchConfig(max_workers=1, executor=ExecutorKind.THREAD)


class TestCandidatePositions:
    def test_excludes_start_even_when_revisited(self, ring_text: str) -> None:
        grid, start = parse_board(ring_text)
        path = run_baseline(grid, start).path
        revisits = [s for s in path[1:] if s.position == start.position]
        assert revisits and revisits[0].facing != start.facing
        candidates = candidate_positions(path, start)
        assert start.position not in candidates
        assert candidates == [(1, 1), (1, 2), (2, 2), (2, 0)]

    def test_deduplicates_in_first_visit_order(self) -> None:
        start = AgentState((0, 0), Facing.RIGHT)
        path = [
            start,
            AgentState((0, 1), Facing.RIGHT),
            AgentState((0, 2), Facing.DOWN),
            AgentState((0, 1), Facing.LEFT),
        ]
        assert candidate_positions(path, start) == [(0, 1), (0, 2)]

    def test_empty_path(self) -> None:
        assert candidate_positions([], AgentState((0, 0), Facing.UP)) == []


class TestRunTrial:
    def test_loop_inducing_position(self, ring_text: str) -> None:
        grid, start = parse_board(ring_text)
        result = run_trial(grid, start, (2, 0), default_step_budget(grid))
        assert result == TrialResult(position=(2, 0), outcome=TrialOutcome.LOOPED, steps=5)
        assert result.looped

    def test_escaping_position(self, ring_text: str) -> None:
        grid, start = parse_board(ring_text)
        result = run_trial(grid, start, (1, 1), default_step_budget(grid))
        assert result.outcome == TrialOutcome.ESCAPED
        assert not result.looped

    def test_trial_leaves_shared_grid_untouched(self, ring_text: str) -> None:
        grid, start = parse_board(ring_text)
        before = grid.cells.copy()
        run_trial(grid, start, (2, 0), default_step_budget(grid))
        assert np.array_equal(grid.cells, before)

    def test_trapped_trial_is_local(
        self, three_wall_text: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        grid, start = parse_board(three_wall_text)
        with caplog.at_level(logging.WARNING):
            result = run_trial(grid, start, (2, 1), default_step_budget(grid))
        assert result.outcome == TrialOutcome.TRAPPED
        assert not result.looped
        assert "trapped" in caplog.text

    def test_budget_exceeded_trial_is_local(self, example_text: str) -> None:
        grid, start = parse_board(example_text)
        result = run_trial(grid, start, (6, 3), step_budget=3)
        assert result.outcome == TrialOutcome.BUDGET_EXCEEDED
        assert not result.looped

    def test_start_position_rejected(self, ring_text: str) -> None:
        grid, start = parse_board(ring_text)
        with pytest.raises(ValueError, match="start position"):
            run_trial(grid, start, start.position, default_step_budget(grid))


class TestCountLoopInducingObstructions:
    def test_ring_board(self, ring_text: str) -> None:
        grid, start = parse_board(ring_text)
        path = run_baseline(grid, start).path
        result = count_loop_inducing_obstructions(grid, start, path, config=THREADS_1)
        assert result.positions == frozenset({(2, 0)})
        assert result.count == 1
        assert [t.position for t in result.trials] == sorted([(1, 1), (1, 2), (2, 2), (2, 0)])

    def test_example_board(self, example_text: str) -> None:
        grid, start = parse_board(example_text)
        path = run_baseline(grid, start).path
        result = count_loop_inducing_obstructions(grid, start, path, config=THREADS_1)
        assert result.count == 6
        assert (6, 3) in result.positions
        assert start.position not in result.positions

    def test_trapped_trial_excluded(self, three_wall_text: str) -> None:
        grid, start = parse_board(three_wall_text)
        path = run_baseline(grid, start).path
        result = count_loop_inducing_obstructions(grid, start, path, config=THREADS_1)
        assert result.count == 0
        assert [t.outcome for t in result.trials] == [TrialOutcome.TRAPPED]

    def test_empty_path_yields_no_trials(self, ring_text: str) -> None:
        grid, start = parse_board(ring_text)
        result = count_loop_inducing_obstructions(grid, start, [start], config=THREADS_1)
        assert result.count == 0
        assert result.trials == ()

    @pytest.mark.parametrize("workers", [1, 2, 4])
    def test_invariant_under_thread_pool_size(self, example_text: str, workers: int) -> None:
        grid, start = parse_board(example_text)
        path = run_baseline(grid, start).path
        reference = count_loop_inducing_obstructions(grid, start, path, config=THREADS_1)
        result = count_loop_inducing_obstructions(
            grid,
            start,
            path,
            config=SearchConfig(max_workers=workers, executor=ExecutorKind.THREAD),
        )
        assert result.positions == reference.positions
        assert result.trials == reference.trials

    def test_process_pool_matches_thread_pool(self, example_text: str) -> None:
        grid, start = parse_board(example_text)
        path = run_baseline(grid, start).path
        reference = count_loop_inducing_obstructions(grid, start, path, config=THREADS_1)
        result = count_loop_inducing_obstructions(
            grid,
            start,
            path,
            config=SearchConfig(max_workers=2, executor=ExecutorKind.PROCESS),
        )
        assert result.positions == reference.positions
        assert result.trials == reference.trials

    def test_larger_budget_factor_finds_same_loops(self, example_text: str) -> None:
        grid, start = parse_board(example_text)
        path = run_baseline(grid, start).path
        config = SearchConfig(max_workers=1, executor=ExecutorKind.THREAD, step_budget_factor=8)
        result = count_loop_inducing_obstructions(grid, start, path, config=config)
        reference = count_loop_inducing_obstructions(grid, start, path, config=THREADS_1)
        assert result.positions == reference.positions
        assert all(t.outcome != TrialOutcome.BUDGET_EXCEEDED for t in result.trials)
