"""Configuration dataclasses for baseline patrol and obstruction search runs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from guard_patrol.config.constants import DEFAULT_OUT_DIR, NUM_FACINGS, STEP_BUDGET_FACTOR

__all__ = [
    "ExecutorKind",
    "RunConfig",
    "SearchConfig",
]


class ExecutorKind(Enum):
    """Worker pool used to evaluate obstruction trials."""

    PROCESS = "process"
    THREAD = "thread"


@dataclass(frozen=True)
class SearchConfig:
    """Obstruction-search knobs: pool size, pool kind, and per-trial step budget."""

    max_workers: int | None = None
    executor: ExecutorKind = ExecutorKind.PROCESS
    step_budget_factor: int = STEP_BUDGET_FACTOR

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        # Below NUM_FACINGS the budget can run out before every state is seen.
        if self.step_budget_factor < NUM_FACINGS:
            raise ValueError(f"step_budget_factor must be >= {NUM_FACINGS}")

    def resolved_workers(self) -> int:
        """Pool size: explicit ``max_workers`` or the available CPU count."""
        if self.max_workers is not None:
            return self.max_workers
        return os.cpu_count() or 1


@dataclass(frozen=True)
class RunConfig:
    """Full CLI run: input board, search settings, and output locations."""

    input_path: Path
    out_dir: Path = Path(DEFAULT_OUT_DIR)
    search: SearchConfig = SearchConfig()
    render_path: Path | None = None
    print_board: bool = False
    write_artifacts: bool = True
