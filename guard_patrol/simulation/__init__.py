"""Simulation layer: the patrol engine and its outcome types."""

from guard_patrol.simulation.engine import (
    Escaped,
    Looped,
    PatrolOutcome,
    default_step_budget,
    detect_loop,
    run_escape,
)

__all__ = [
    "Escaped",
    "Looped",
    "PatrolOutcome",
    "default_step_budget",
    "detect_loop",
    "run_escape",
]
