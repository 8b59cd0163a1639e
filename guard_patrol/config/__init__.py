"""Configuration layer: constants and typed config dataclasses."""

from guard_patrol.config.constants import (
    DEFAULT_OUT_DIR,
    GUARD_CHARS,
    MAX_ROTATIONS,
    NUM_FACINGS,
    OBSTACLE_CHAR,
    OPEN_CHAR,
    STEP_BUDGET_FACTOR,
    SYNTHETIC_OBSTACLE_CHAR,
)
from guard_patrol.config.types import ExecutorKind, RunConfig, SearchConfig

__all__ = [
    "DEFAULT_OUT_DIR",
    "ExecutorKind",
    "GUARD_CHARS",
    "MAX_ROTATIONS",
    "NUM_FACINGS",
    "OBSTACLE_CHAR",
    "OPEN_CHAR",
    "RunConfig",
    "STEP_BUDGET_FACTOR",
    "SYNTHETIC_OBSTACLE_CHAR",
    "SearchConfig",
]
