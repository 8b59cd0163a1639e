"""Centralized domain constants for patrol simulation and obstruction search.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

NUM_FACINGS = 4
"""Number of headings a guard can hold (up, right, down, left)."""

MAX_ROTATIONS = NUM_FACINGS
"""Maximum forward attempts in a single movement step before the guard is trapped."""

STEP_BUDGET_FACTOR = NUM_FACINGS
"""Default per-trial step budget, in steps per grid cell.

A guard has at most ``NUM_FACINGS * width * height`` distinct states, so a
budget of one more step than that can only be exhausted by a deviant rule.
"""

OPEN_CHAR = "."
"""Board character for an open cell."""

OBSTACLE_CHAR = "#"
"""Board character for a permanent obstacle."""

SYNTHETIC_OBSTACLE_CHAR = "O"
"""Display character for the obstruction inserted by a single trial."""

GUARD_CHARS: tuple[str, ...] = ("^", ">", "v", "<")
"""Board characters marking the guard start, in clockwise facing order."""

DEFAULT_OUT_DIR = "data"
"""Default output directory for CLI artifacts."""
