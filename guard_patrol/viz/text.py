"""ASCII projection of a grid, read-only over its state."""

from __future__ import annotations

from guard_patrol.config.constants import OBSTACLE_CHAR, OPEN_CHAR, SYNTHETIC_OBSTACLE_CHAR
from guard_patrol.domain.agent import AgentState
from guard_patrol.domain.grid import Cell, CellKind, Grid


def cell_char(cell: Cell) -> str:
    """``|``/``-``/``+`` for cells crossed vertically, horizontally, or both."""
    if cell.kind == CellKind.OBSTACLE:
        return OBSTACLE_CHAR
    if cell.kind == CellKind.SYNTHETIC_OBSTACLE:
        return SYNTHETIC_OBSTACLE_CHAR
    if cell.kind == CellKind.VISITED:
        orientations = {facing.orientation for facing in cell.facings}
        if len(orientations) == 2:
            return "+"
        return "|" if "vertical" in orientations else "-"
    return OPEN_CHAR


def render_board(grid: Grid, guard: AgentState | None = None) -> str:
    """Render *grid* one text line per row, with the guard glyph overlaid."""
    lines: list[str] = []
    for row in range(grid.height):
        chars = [cell_char(grid.get((row, col))) for col in range(grid.width)]
        if guard is not None and guard.position[0] == row and grid.in_bounds(guard.position):
            chars[guard.position[1]] = guard.facing.glyph
        lines.append("".join(chars))
    return "\n".join(lines) + "\n"
