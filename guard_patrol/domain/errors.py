"""Exception hierarchy for patrol simulation.

Only ``MalformedGridError`` aborts a whole run; ``TrappedError`` and
``StepBudgetExceededError`` are local to the single trial that raised them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from guard_patrol.domain.agent import AgentState


class PatrolError(Exception):
    """Base class for patrol simulation failures."""


class MalformedGridError(PatrolError, ValueError):
    """Board input is empty, non-rectangular, or has invalid characters."""


class TrappedError(PatrolError):
    """The guard cannot move forward in any of the four facings."""

    def __init__(self, state: AgentState) -> None:
        super().__init__(f"guard trapped at {state.position}")
        self.state = state


class StepBudgetExceededError(PatrolError):
    """A run took more steps than its budget allows."""

    def __init__(self, budget: int, state: AgentState) -> None:
        super().__init__(f"step budget {budget} exhausted at {state.position}")
        self.budget = budget
        self.state = state
