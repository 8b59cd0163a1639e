"""Fixed-size rectangular patrol grid with bounds-checked cell access.

Cells are stored as a ``(height, width)`` ``uint8`` array. The low four bits
hold the set of facings the guard held while standing on the cell (one bit
per facing, clockwise index order); the two high flags mark permanent and
synthetic obstacles. A cell with no bits set is open.

Off-grid reads return ``OUT_OF_BOUNDS_CELL``, which is passable: stepping
onto it is how the guard leaves the grid. Off-grid writes are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from guard_patrol.config.constants import OBSTACLE_CHAR, OPEN_CHAR
from guard_patrol.domain.errors import MalformedGridError
from guard_patrol.domain.facing import Facing

Position = tuple[int, int]
"""Grid coordinate as ``(row, col)``."""

_FACING_MASK = 0x0F
_OBSTACLE_FLAG = 0x10
_SYNTHETIC_FLAG = 0x20


class CellKind(Enum):
    """Tag of a Cell value."""

    OPEN = "open"
    VISITED = "visited"
    OBSTACLE = "obstacle"
    SYNTHETIC_OBSTACLE = "synthetic_obstacle"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True)
class Cell:
    """Tagged cell value; ``facings`` is non-empty only for VISITED cells."""

    kind: CellKind
    facings: frozenset[Facing] = frozenset()

    def __post_init__(self) -> None:
        if self.kind == CellKind.VISITED and not self.facings:
            raise ValueError("visited cell must record at least one facing")
        if self.kind != CellKind.VISITED and self.facings:
            raise ValueError(f"{self.kind.value} cell cannot record facings")

    @property
    def is_passable(self) -> bool:
        return self.kind in (CellKind.OPEN, CellKind.VISITED, CellKind.OUT_OF_BOUNDS)

    @property
    def is_obstacle(self) -> bool:
        return self.kind in (CellKind.OBSTACLE, CellKind.SYNTHETIC_OBSTACLE)

    @classmethod
    def visited(cls, facings: Iterable[Facing]) -> Cell:
        return cls(kind=CellKind.VISITED, facings=frozenset(facings))


OPEN_CELL = Cell(CellKind.OPEN)
OBSTACLE_CELL = Cell(CellKind.OBSTACLE)
SYNTHETIC_OBSTACLE_CELL = Cell(CellKind.SYNTHETIC_OBSTACLE)
OUT_OF_BOUNDS_CELL = Cell(CellKind.OUT_OF_BOUNDS)


def _encode(cell: Cell) -> int:
    if cell.kind == CellKind.OBSTACLE:
        return _OBSTACLE_FLAG
    if cell.kind == CellKind.SYNTHETIC_OBSTACLE:
        return _SYNTHETIC_FLAG
    if cell.kind == CellKind.OUT_OF_BOUNDS:
        raise ValueError("out-of-bounds sentinel cannot be stored in a grid")
    code = 0
    for facing in cell.facings:
        code |= 1 << facing.index
    return code


def _decode(code: int) -> Cell:
    if code & _OBSTACLE_FLAG:
        return OBSTACLE_CELL
    if code & _SYNTHETIC_FLAG:
        return SYNTHETIC_OBSTACLE_CELL
    if code == 0:
        return OPEN_CELL
    return Cell.visited(f for f in Facing if code & (1 << f.index))


@dataclass
class Grid:
    """Rectangular board of cells indexed ``[row][col]``."""

    width: int
    height: int
    cells: np.ndarray

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise MalformedGridError("grid dimensions must be >= 1x1")
        if self.cells.shape != (self.height, self.width):
            raise MalformedGridError(
                f"cell array shape {self.cells.shape} does not match "
                f"{self.height}x{self.width}"
            )

    @classmethod
    def empty(cls, width: int, height: int) -> Grid:
        """Return an all-open grid."""
        if width < 1 or height < 1:
            raise MalformedGridError("grid dimensions must be >= 1x1")
        return cls(width=width, height=height, cells=np.zeros((height, width), dtype=np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Grid:
        """Build a grid from ``.``/``#`` rows.

        Raises :exc:`MalformedGridError` for empty input, ragged rows, or any
        character other than open/obstacle.
        """
        if not rows:
            raise MalformedGridError("grid must have at least one row")
        width = len(rows[0])
        if width == 0:
            raise MalformedGridError("grid rows must not be empty")
        cells = np.zeros((len(rows), width), dtype=np.uint8)
        for row_idx, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGridError(
                    f"row {row_idx} has length {len(row)}, expected {width}"
                )
            for col_idx, ch in enumerate(row):
                if ch == OBSTACLE_CHAR:
                    cells[row_idx, col_idx] = _OBSTACLE_FLAG
                elif ch != OPEN_CHAR:
                    raise MalformedGridError(
                        f"invalid cell character {ch!r} at ({row_idx}, {col_idx})"
                    )
        return cls(width=width, height=len(rows), cells=cells)

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, position: Position) -> Cell:
        """Return the cell at *position*, or the out-of-bounds sentinel."""
        if not self.in_bounds(position):
            return OUT_OF_BOUNDS_CELL
        return _decode(int(self.cells[position]))

    def is_passable(self, position: Position) -> bool:
        if not self.in_bounds(position):
            return True
        return not int(self.cells[position]) & (_OBSTACLE_FLAG | _SYNTHETIC_FLAG)

    def set(self, position: Position, cell: Cell) -> None:
        """Store *cell* at *position*; off-grid positions are ignored.

        Permanent obstacles never change once placed.
        """
        if not self.in_bounds(position):
            return
        if int(self.cells[position]) & _OBSTACLE_FLAG and cell.kind != CellKind.OBSTACLE:
            raise ValueError(f"cannot overwrite permanent obstacle at {position}")
        self.cells[position] = _encode(cell)

    def mark_visited(self, position: Position, facing: Facing) -> None:
        """Add *facing* to the visited set of a passable in-grid cell."""
        if not self.in_bounds(position) or not self.is_passable(position):
            return
        self.cells[position] |= 1 << facing.index

    def visited_count(self) -> int:
        """Number of distinct cells the guard has stood on."""
        return int(np.count_nonzero(self.cells & _FACING_MASK))

    def visited_positions(self) -> Iterator[Position]:
        rows, cols = np.nonzero(self.cells & _FACING_MASK)
        for row, col in zip(rows.tolist(), cols.tolist(), strict=True):
            yield (row, col)

    def positions(self) -> Iterator[Position]:
        for row in range(self.height):
            for col in range(self.width):
                yield (row, col)

    def copy(self) -> Grid:
        """Return a deep copy that shares no cell storage with this grid."""
        return Grid(width=self.width, height=self.height, cells=self.cells.copy())
