"""Colour presets for the patrol board renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of board style tokens."""

    open_color: str = "#F0F0F0"
    visited_color: str = "#90CAF9"
    obstacle_color: str = "#424242"
    synthetic_obstacle_color: str = "#FF5722"
    loop_position_color: str = "#FFC107"
    start_color: str = "#4CAF50"
    grid_line_color: str = "#CCCCCC"


DEFAULT_THEME = Theme()

DARK_THEME = Theme(
    open_color="#1A1A1A",
    visited_color="#1565C0",
    obstacle_color="#BDBDBD",
    grid_line_color="#333333",
)
