"""Guard state and the deterministic step/rotate movement rule."""

from __future__ import annotations

from dataclasses import dataclass

from guard_patrol.config.constants import MAX_ROTATIONS
from guard_patrol.domain.errors import TrappedError
from guard_patrol.domain.facing import Facing
from guard_patrol.domain.grid import Grid, Position


@dataclass(frozen=True)
class AgentState:
    """Immutable guard state; equality and hash cover position and facing."""

    position: Position
    facing: Facing

    def ahead(self) -> Position:
        """Position one step forward along the current facing."""
        d_row, d_col = self.facing.delta
        row, col = self.position
        return (row + d_row, col + d_col)

    def turned(self) -> AgentState:
        return AgentState(position=self.position, facing=self.facing.rotate_cw())


def turn_and_step(grid: Grid, state: AgentState) -> tuple[AgentState, int]:
    """Apply one movement step and report how many clockwise turns it took.

    The guard moves forward if the cell ahead is passable (off-grid counts as
    passable); otherwise it turns clockwise in place and tries again. Raises
    :exc:`TrappedError` when all ``MAX_ROTATIONS`` attempts are blocked.
    """
    current = state
    for rotations in range(MAX_ROTATIONS):
        candidate = current.ahead()
        if grid.is_passable(candidate):
            return AgentState(position=candidate, facing=current.facing), rotations
        current = current.turned()
    raise TrappedError(state)


def advance(grid: Grid, state: AgentState) -> AgentState:
    """Transition function: the guard's next state on *grid*."""
    next_state, _ = turn_and_step(grid, state)
    return next_state
