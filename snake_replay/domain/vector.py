"""Immutable 2D integer coordinate used for every tile position."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """Tile coordinate on the board grid.

    Arithmetic never mutates; every operation returns a new instance, so a
    vector stored in a snake's ``tiles`` trail can be shared freely.
    """

    x: int
    y: int

    def add(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def mul(self, scalar: int) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def invert(self) -> Vector:
        return self.mul(-1)

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.sub(other)

    def __mul__(self, scalar: int) -> Vector:
        return self.mul(scalar)

    def __neg__(self) -> Vector:
        return self.invert()

    def to_list(self) -> list[int]:
        return [self.x, self.y]

    @classmethod
    def from_sequence(cls, raw: object) -> Vector:
        """Build from a two-element ``[x, y]`` sequence or ``{"x", "y"}`` mapping."""
        if isinstance(raw, dict):
            values = (raw.get("x"), raw.get("y"))
        elif isinstance(raw, (list, tuple)) and len(raw) == 2:
            values = (raw[0], raw[1])
        else:
            raise ValueError(f"vector must be [x, y] or {{x, y}}: {raw!r}")
        x, y = values
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y)):
            raise ValueError(f"vector coordinates must be integers: {raw!r}")
        return cls(x, y)
