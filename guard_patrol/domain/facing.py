"""Guard headings and the fixed 90-degree rotation rule.

Positions are ``(row, col)`` tuples, so ``UP`` decreases the row index and
``RIGHT`` increases the column index.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from guard_patrol.config.constants import GUARD_CHARS

Orientation = Literal["vertical", "horizontal"]


class Facing(Enum):
    """One of the four cardinal headings, in clockwise order."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def index(self) -> int:
        """Clockwise index: UP=0, RIGHT=1, DOWN=2, LEFT=3."""
        return _CLOCKWISE.index(self)

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step as ``(d_row, d_col)``."""
        return _DELTAS[self]

    @property
    def glyph(self) -> str:
        return GUARD_CHARS[self.index]

    @property
    def orientation(self) -> Orientation:
        return "vertical" if self in (Facing.UP, Facing.DOWN) else "horizontal"

    def rotate_cw(self) -> Facing:
        return _CLOCKWISE[(self.index + 1) % len(_CLOCKWISE)]

    def rotate_ccw(self) -> Facing:
        return _CLOCKWISE[(self.index - 1) % len(_CLOCKWISE)]

    @classmethod
    def from_glyph(cls, glyph: str) -> Facing:
        """Parse a guard character (``^ > v <``) into a Facing."""
        try:
            return _CLOCKWISE[GUARD_CHARS.index(glyph)]
        except ValueError as exc:
            valid = " ".join(GUARD_CHARS)
            raise ValueError(f"guard glyph must be one of {valid}, got {glyph!r}") from exc


_CLOCKWISE: tuple[Facing, ...] = (Facing.UP, Facing.RIGHT, Facing.DOWN, Facing.LEFT)

_DELTAS: dict[Facing, tuple[int, int]] = {
    Facing.UP: (-1, 0),
    Facing.RIGHT: (0, 1),
    Facing.DOWN: (1, 0),
    Facing.LEFT: (0, -1),
}
