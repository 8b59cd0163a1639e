"""Visualization layer: ASCII board projection and matplotlib figures."""

from guard_patrol.viz.render import build_board_array, render_patrol_figure
from guard_patrol.viz.text import cell_char, render_board
from guard_patrol.viz.theme import DARK_THEME, DEFAULT_THEME, Theme

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "Theme",
    "build_board_array",
    "cell_char",
    "render_board",
    "render_patrol_figure",
]
