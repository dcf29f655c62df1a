"""Ready-made stage layouts."""

from __future__ import annotations

import time

from snake_replay.config.constants import DEFAULT_ARENA_HEIGHT, DEFAULT_ARENA_WIDTH
from snake_replay.config.types import SnakeStart, StageConfig
from snake_replay.domain.state import Direction
from snake_replay.domain.vector import Vector


def default_stage(
    seed: int | None = None,
    x_tiles: int = DEFAULT_ARENA_WIDTH,
    y_tiles: int = DEFAULT_ARENA_HEIGHT,
) -> StageConfig:
    """Two-player arena: side portals at mid-height and a 2x2 centre block.

    When ``seed`` is omitted the wall clock (milliseconds) is used, so every
    new game gets a different apple sequence.
    """
    if seed is None:
        seed = int(time.time() * 1000)
    half_x, half_y = x_tiles // 2, y_tiles // 2
    return StageConfig(
        x_tiles=x_tiles,
        y_tiles=y_tiles,
        seed=seed,
        wall_holes=(
            Vector(0, half_y),
            Vector(0, half_y + 1),
            Vector(x_tiles - 1, half_y),
            Vector(x_tiles - 1, half_y + 1),
        ),
        blocks=(
            Vector(half_x, half_y),
            Vector(half_x - 1, half_y - 1),
            Vector(half_x, half_y - 1),
            Vector(half_x - 1, half_y),
        ),
        snakes=(
            SnakeStart(Vector(4, 4), Direction.RIGHT),
            SnakeStart(Vector(x_tiles - 4, y_tiles - 4), Direction.LEFT),
        ),
    )


def open_stage(
    x_tiles: int,
    y_tiles: int,
    seed: int,
    start: Vector | None = None,
    direction: Direction = Direction.RIGHT,
) -> StageConfig:
    """Single snake, border wall only, starting at the centre by default."""
    if start is None:
        start = Vector(x_tiles // 2, y_tiles // 2)
    return StageConfig(
        x_tiles=x_tiles,
        y_tiles=y_tiles,
        seed=seed,
        snakes=(SnakeStart(start, direction),),
    )
