"""Mutable world state owned and mutated by the simulation engine.

External collaborators (renderers, actors) read these objects but never
write them; only ``SimulationEngine`` steps mutate a ``SimulationState``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from snake_replay.domain.vector import Vector


class Direction(IntEnum):
    """Cardinal heading. A direction plus its opposite sums to zero."""

    UP = 1
    RIGHT = 2
    LEFT = -2
    DOWN = -1

    def is_opposite(self, other: Direction) -> bool:
        return self + other == 0

    @classmethod
    def parse(cls, raw: object) -> Direction:
        """Parse an integer value or a case-insensitive member name."""
        if isinstance(raw, Direction):
            return raw
        if isinstance(raw, str):
            try:
                return cls[raw.strip().upper()]
            except KeyError as exc:
                valid = ", ".join(d.name for d in cls)
                raise ValueError(f"direction must be one of {valid}: {raw!r}") from exc
        if isinstance(raw, int) and not isinstance(raw, bool):
            try:
                return cls(raw)
            except ValueError as exc:
                valid = ", ".join(str(d.value) for d in cls)
                raise ValueError(f"direction must be one of {valid}: {raw!r}") from exc
        raise ValueError(f"invalid direction: {raw!r}")


class AppleType(Enum):
    """Apple kinds and their effect on target length."""

    NORMAL = "normal"
    DIET = "diet"


@dataclass(frozen=True)
class Apple:
    """An apple on the board. Replaced wholesale, never mutated."""

    position: Vector
    type: AppleType


@dataclass
class SnakeState:
    """Per-snake state. ``tiles`` is ordered oldest first; the head is last."""

    position: Vector
    dir: Direction
    length: int
    target_length: int
    tiles: list[Vector] = field(default_factory=list)
    pending_dirs: list[Direction] = field(default_factory=list)
    score: int = 0

    def occupies(self, position: Vector) -> bool:
        return position in self.tiles


@dataclass
class SimulationState:
    """The whole mutable world for one engine."""

    blocks: list[Vector]
    speed: int
    snakes: list[SnakeState]
    apple: Apple | None = None
    game_over: bool = False
