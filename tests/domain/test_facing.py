"""Tests for guard_patrol.domain.facing module."""

from __future__ import annotations

import pytest

from guard_patrol.domain.facing import Facing


class TestRotation:
    def test_clockwise_order(self) -> None:
        assert Facing.UP.rotate_cw() == Facing.RIGHT
        assert Facing.RIGHT.rotate_cw() == Facing.DOWN
        assert Facing.DOWN.rotate_cw() == Facing.LEFT
        assert Facing.LEFT.rotate_cw() == Facing.UP

    def test_counter_clockwise_inverts_clockwise(self) -> None:
        for facing in Facing:
            assert facing.rotate_cw().rotate_ccw() == facing

    def test_four_rotations_return_to_start(self) -> None:
        for facing in Facing:
            current = facing
            for _ in range(4):
                current = current.rotate_cw()
            assert current == facing


def test_deltas_are_row_col_unit_steps() -> None:
    assert Facing.UP.delta == (-1, 0)
    assert Facing.RIGHT.delta == (0, 1)
    assert Facing.DOWN.delta == (1, 0)
    assert Facing.LEFT.delta == (0, -1)


def test_opposite_facings_cancel() -> None:
    for facing in Facing:
        opposite = facing.rotate_cw().rotate_cw()
        assert tuple(a + b for a, b in zip(facing.delta, opposite.delta)) == (0, 0)


def test_glyph_round_trip() -> None:
    assert [f.glyph for f in Facing] == ["^", ">", "v", "<"]
    for facing in Facing:
        assert Facing.from_glyph(facing.glyph) == facing


def test_from_glyph_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="guard glyph"):
        Facing.from_glyph("x")


def test_orientation() -> None:
    assert Facing.UP.orientation == "vertical"
    assert Facing.DOWN.orientation == "vertical"
    assert Facing.LEFT.orientation == "horizontal"
    assert Facing.RIGHT.orientation == "horizontal"
