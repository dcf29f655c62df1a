"""Tests for the immutable Vector coordinate."""

from __future__ import annotations

import pytest

from snake_replay.domain.vector import Vector


class TestArithmetic:
    def test_add_and_sub(self) -> None:
        assert Vector(1, 2) + Vector(3, -1) == Vector(4, 1)
        assert Vector(1, 2) - Vector(3, -1) == Vector(-2, 3)

    def test_mul_and_invert(self) -> None:
        assert Vector(2, -3) * 2 == Vector(4, -6)
        assert -Vector(2, -3) == Vector(-2, 3)
        assert Vector(2, -3).invert() == Vector(2, -3).mul(-1)

    def test_operations_return_new_instances(self) -> None:
        v = Vector(1, 1)
        moved = v.add(Vector(1, 0))
        assert v == Vector(1, 1)
        assert moved is not v

    def test_is_hashable_and_frozen(self) -> None:
        cells = {Vector(1, 1), Vector(1, 1), Vector(2, 1)}
        assert len(cells) == 2
        with pytest.raises(AttributeError):
            Vector(0, 0).x = 5  # type: ignore[misc]


class TestFromSequence:
    def test_accepts_list_and_mapping(self) -> None:
        assert Vector.from_sequence([3, 4]) == Vector(3, 4)
        assert Vector.from_sequence({"x": 3, "y": 4}) == Vector(3, 4)

    def test_round_trips_through_list(self) -> None:
        assert Vector.from_sequence(Vector(7, 0).to_list()) == Vector(7, 0)

    @pytest.mark.parametrize("raw", [[1], [1, 2, 3], "12", None, [1.5, 2], [True, 0], {"x": 1}])
    def test_rejects_malformed(self, raw: object) -> None:
        with pytest.raises(ValueError):
            Vector.from_sequence(raw)
