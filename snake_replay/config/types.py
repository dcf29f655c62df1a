"""Configuration dataclasses for stages and headless runs.

All frozen dataclasses validate in ``__post_init__`` so a malformed stage
fails at construction instead of desynchronising a replay later on.
"""

from __future__ import annotations

from dataclasses import dataclass

from snake_replay.config.constants import (
    HEADLESS_MAX_STEPS,
    HEADLESS_TIME_STEP_MS,
    MIN_BOARD_SIZE,
)
from snake_replay.domain.state import Direction
from snake_replay.domain.vector import Vector

__all__ = [
    "HeadlessConfig",
    "SnakeStart",
    "StageConfig",
]


@dataclass(frozen=True)
class SnakeStart:
    """Initial head position and heading of one snake."""

    position: Vector
    direction: Direction

    def __post_init__(self) -> None:
        if not isinstance(self.position, Vector):
            raise ValueError(f"snake position must be a Vector: {self.position!r}")
        if not isinstance(self.direction, Direction):
            object.__setattr__(self, "direction", Direction.parse(self.direction))


@dataclass(frozen=True)
class StageConfig:
    """Immutable per-game configuration.

    ``wall_holes`` are perimeter cells left out of the generated border wall;
    a snake leaving the board through one re-enters on the opposite edge.
    ``blocks`` are extra obstacles merged with the border.
    """

    x_tiles: int
    y_tiles: int
    seed: int
    snakes: tuple[SnakeStart, ...]
    wall_holes: tuple[Vector, ...] = ()
    blocks: tuple[Vector, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so the stage stays hashable.
        object.__setattr__(self, "snakes", tuple(self.snakes))
        object.__setattr__(self, "wall_holes", tuple(self.wall_holes))
        object.__setattr__(self, "blocks", tuple(self.blocks))

        for name in ("x_tiles", "y_tiles", "seed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer")
        if self.x_tiles < MIN_BOARD_SIZE or self.y_tiles < MIN_BOARD_SIZE:
            raise ValueError(f"board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}")
        if not self.snakes:
            raise ValueError("stage must define at least one snake")
        for snake in self.snakes:
            if not isinstance(snake, SnakeStart):
                raise ValueError(f"snakes must contain SnakeStart entries: {snake!r}")
            if not self.in_bounds(snake.position):
                raise ValueError(f"snake start out of bounds: {snake.position}")
        for hole in self.wall_holes:
            if not self.on_perimeter(hole):
                raise ValueError(f"wall hole must lie on the border: {hole}")
        for block in self.blocks:
            if not self.in_bounds(block):
                raise ValueError(f"block out of bounds: {block}")

    def in_bounds(self, position: Vector) -> bool:
        return 0 <= position.x < self.x_tiles and 0 <= position.y < self.y_tiles

    def on_perimeter(self, position: Vector) -> bool:
        if not self.in_bounds(position):
            return False
        return position.x in (0, self.x_tiles - 1) or position.y in (0, self.y_tiles - 1)

    def with_seed(self, seed: int) -> StageConfig:
        """Return a copy of this stage with a different random seed."""
        return StageConfig(
            x_tiles=self.x_tiles,
            y_tiles=self.y_tiles,
            seed=seed,
            snakes=self.snakes,
            wall_holes=self.wall_holes,
            blocks=self.blocks,
        )


@dataclass(frozen=True)
class HeadlessConfig:
    """Knobs for driving an engine without a host loop."""

    time_step_ms: float = HEADLESS_TIME_STEP_MS
    max_steps: int = HEADLESS_MAX_STEPS

    def __post_init__(self) -> None:
        if not self.time_step_ms > 0:
            raise ValueError("time_step_ms must be > 0")
        if self.max_steps < 1:
            raise ValueError("max_steps must be >= 1")
