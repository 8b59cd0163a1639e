"""Shared board fixtures for patrol tests."""

from __future__ import annotations

import pytest

# Reference example: 41 distinct cells visited, 6 loop-inducing obstructions.
EXAMPLE_BOARD = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

# Guard turns right then down and leaves through the bottom edge.
BOTTOM_EXIT_BOARD = """\
.#...
....#
.^...
#....
.....
"""

# Guard circles a 2x2 ring and exits left through (2, 0), passing back over
# its own start cell facing left. Blocking (2, 0) closes the ring.
RING_BOARD = """\
.#..
...#
.^..
..#.
"""

# RING_BOARD with (2, 0) permanently blocked: the baseline never escapes.
CLOSED_RING_BOARD = """\
.#..
...#
#^..
..#.
"""

# Guard is walled on three sides and must turn twice to move down.
THREE_WALL_BOARD = """\
.#.
#^#
...
"""

# Guard is walled on all four sides.
BOXED_BOARD = """\
.#.
#^#
.#.
"""


@pytest.fixture
def example_text() -> str:
    return EXAMPLE_BOARD


@pytest.fixture
def bottom_exit_text() -> str:
    return BOTTOM_EXIT_BOARD


@pytest.fixture
def ring_text() -> str:
    return RING_BOARD


@pytest.fixture
def closed_ring_text() -> str:
    return CLOSED_RING_BOARD


@pytest.fixture
def three_wall_text() -> str:
    return THREE_WALL_BOARD


@pytest.fixture
def boxed_text() -> str:
    return BOXED_BOARD
