"""Guard patrol simulation and loop-inducing obstruction search."""

from guard_patrol.experiments import (
    count_loop_inducing_obstructions,
    run_baseline,
    solve,
)
from guard_patrol.io.loader import load_board, parse_board

__all__ = [
    "count_loop_inducing_obstructions",
    "load_board",
    "parse_board",
    "run_baseline",
    "solve",
]
