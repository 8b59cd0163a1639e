"""Domain layer: facings, grid cells, guard state, and errors."""

from guard_patrol.domain.agent import AgentState, advance, turn_and_step
from guard_patrol.domain.errors import (
    MalformedGridError,
    PatrolError,
    StepBudgetExceededError,
    TrappedError,
)
from guard_patrol.domain.facing import Facing
from guard_patrol.domain.grid import (
    OBSTACLE_CELL,
    OPEN_CELL,
    OUT_OF_BOUNDS_CELL,
    SYNTHETIC_OBSTACLE_CELL,
    Cell,
    CellKind,
    Grid,
    Position,
)

__all__ = [
    "AgentState",
    "Cell",
    "CellKind",
    "Facing",
    "Grid",
    "MalformedGridError",
    "OBSTACLE_CELL",
    "OPEN_CELL",
    "OUT_OF_BOUNDS_CELL",
    "PatrolError",
    "Position",
    "SYNTHETIC_OBSTACLE_CELL",
    "StepBudgetExceededError",
    "TrappedError",
    "advance",
    "turn_and_step",
]
