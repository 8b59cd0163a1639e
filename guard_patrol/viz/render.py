"""Matplotlib rendering of a patrolled board and its loop-inducing cells."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from guard_patrol.domain.agent import AgentState
from guard_patrol.domain.grid import CellKind, Grid, Position
from guard_patrol.viz.theme import DEFAULT_THEME, Theme

OPEN_CODE = 0
VISITED_CODE = 1
OBSTACLE_CODE = 2
SYNTHETIC_CODE = 3
LOOP_CODE = 4
START_CODE = 5

_KIND_CODES: dict[CellKind, int] = {
    CellKind.OPEN: OPEN_CODE,
    CellKind.VISITED: VISITED_CODE,
    CellKind.OBSTACLE: OBSTACLE_CODE,
    CellKind.SYNTHETIC_OBSTACLE: SYNTHETIC_CODE,
}


def build_board_array(
    grid: Grid,
    start: AgentState | None = None,
    loop_positions: Iterable[Position] = (),
) -> np.ndarray:
    """Return (H, W) int array of display codes.

    Loop-inducing positions override the visited code; the start overrides
    everything. Out-of-bounds positions are silently skipped.
    """
    board = np.empty((grid.height, grid.width), dtype=int)
    for row, col in grid.positions():
        board[row, col] = _KIND_CODES[grid.get((row, col)).kind]
    for position in loop_positions:
        if grid.in_bounds(position):
            board[position] = LOOP_CODE
    if start is not None and grid.in_bounds(start.position):
        board[start.position] = START_CODE
    return board


def _board_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 6-colour colormap, one per display code."""
    colors = [
        theme.open_color,
        theme.visited_color,
        theme.obstacle_color,
        theme.synthetic_obstacle_color,
        theme.loop_position_color,
        theme.start_color,
    ]
    cmap = ListedColormap(colors)
    norm = BoundaryNorm([code - 0.5 for code in range(len(colors) + 1)], cmap.N)
    return cmap, norm


def _legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch]:
    return [
        Patch(facecolor=theme.visited_color, label="Visited"),
        Patch(facecolor=theme.obstacle_color, label="Obstacle"),
        Patch(facecolor=theme.loop_position_color, label="Loop obstruction"),
        Patch(facecolor=theme.start_color, label="Start"),
    ]


def _draw_board(ax: plt.Axes, board: np.ndarray, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """imshow with subtle cell lines; lines are skipped on large boards."""
    cmap, norm = _board_cmap(theme)
    img = ax.imshow(board, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = board.shape
    if max(h, w) <= 64:
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_patrol_figure(
    grid: Grid,
    output_path: Path,
    start: AgentState | None = None,
    loop_positions: Iterable[Position] = (),
    title: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Save a PNG of the visited board with loop-inducing cells highlighted."""
    board = build_board_array(grid, start=start, loop_positions=loop_positions)
    fig, ax = plt.subplots(figsize=(6, 6 * grid.height / grid.width))
    _draw_board(ax, board, theme=theme)
    if title:
        ax.set_title(title, fontsize=10)
    fig.legend(handles=_legend_handles(theme), loc="lower center", ncol=4, fontsize=8, frameon=False)
    fig.tight_layout(rect=(0, 0.06, 1, 1))
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
