"""Tests for guard_patrol.viz.render."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from guard_patrol.experiments.baseline import run_baseline
from guard_patrol.io.loader import parse_board
from guard_patrol.viz.render import (
    LOOP_CODE,
    OBSTACLE_CODE,
    OPEN_CODE,
    START_CODE,
    VISITED_CODE,
    build_board_array,
    render_patrol_figure,
)
from guard_patrol.viz.theme import DARK_THEME


def test_build_board_array_codes(ring_text: str) -> None:
    grid, start = parse_board(ring_text)
    visited = run_baseline(grid, start).visited_grid
    board = build_board_array(visited, start=start, loop_positions=[(2, 0), (9, 9)])
    assert board.shape == (4, 4)
    assert board[0, 1] == OBSTACLE_CODE
    assert board[0, 0] == OPEN_CODE
    assert board[1, 1] == VISITED_CODE
    assert board[2, 0] == LOOP_CODE
    assert board[2, 1] == START_CODE
    assert np.count_nonzero(board == VISITED_CODE) == 3


def test_render_patrol_figure_writes_png(tmp_path: Path, example_text: str) -> None:
    grid, start = parse_board(example_text)
    visited = run_baseline(grid, start).visited_grid
    output = tmp_path / "figures" / "board.png"
    render_patrol_figure(visited, output, start=start, loop_positions=[(6, 3)], title="example")
    assert output.exists()
    assert output.read_bytes()[:4] == b"\x89PNG"


def test_render_patrol_figure_dark_theme(tmp_path: Path, ring_text: str) -> None:
    grid, start = parse_board(ring_text)
    output = tmp_path / "dark.png"
    render_patrol_figure(grid, output, theme=DARK_THEME)
    assert output.exists()
