"""Character-board loader producing a Grid and the guard's starting state."""

from __future__ import annotations

from pathlib import Path

from guard_patrol.config.constants import GUARD_CHARS, OPEN_CHAR
from guard_patrol.domain.agent import AgentState
from guard_patrol.domain.errors import MalformedGridError
from guard_patrol.domain.facing import Facing
from guard_patrol.domain.grid import Grid


def parse_board(text: str) -> tuple[Grid, AgentState]:
    """Parse a ``.``/``#`` board with exactly one guard marker (``^ > v <``).

    The guard's cell is handed to the grid as open. Trailing blank lines are
    ignored; any other malformation raises :exc:`MalformedGridError`.
    """
    rows = text.splitlines()
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise MalformedGridError("board is empty")

    start: AgentState | None = None
    cleaned: list[str] = []
    for row_idx, row in enumerate(rows):
        for col_idx, ch in enumerate(row):
            if ch not in GUARD_CHARS:
                continue
            if start is not None:
                raise MalformedGridError(
                    f"second guard at ({row_idx}, {col_idx}); first at {start.position}"
                )
            start = AgentState(position=(row_idx, col_idx), facing=Facing.from_glyph(ch))
        for glyph in GUARD_CHARS:
            row = row.replace(glyph, OPEN_CHAR)
        cleaned.append(row)

    if start is None:
        raise MalformedGridError("board has no guard marker")
    return Grid.from_rows(cleaned), start


def load_board(path: Path) -> tuple[Grid, AgentState]:
    """Read and parse a board file."""
    return parse_board(Path(path).read_text())
