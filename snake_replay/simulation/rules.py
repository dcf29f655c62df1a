"""Pure helpers for one simulation step.

None of these touch the random stream; every random draw happens inside
``SimulationEngine`` in a fixed order.
"""

from __future__ import annotations

import math

from snake_replay.config.constants import (
    DIET_APPLE_FACTOR,
    MIN_SNAKE_LENGTH,
    NORMAL_APPLE_GROWTH,
)
from snake_replay.config.types import StageConfig
from snake_replay.domain.state import AppleType, Direction, SnakeState
from snake_replay.domain.vector import Vector

_OFFSETS: dict[Direction, Vector] = {
    Direction.UP: Vector(0, 1),
    Direction.DOWN: Vector(0, -1),
    Direction.LEFT: Vector(-1, 0),
    Direction.RIGHT: Vector(1, 0),
}


def build_blocks(stage: StageConfig) -> list[Vector]:
    """Perimeter wall minus wall holes, followed by the stage's extra blocks.

    Order: top and bottom rows column by column, then the left and right
    columns without corners.
    """
    perimeter: list[Vector] = []
    for x in range(stage.x_tiles):
        perimeter.append(Vector(x, 0))
        perimeter.append(Vector(x, stage.y_tiles - 1))
    for y in range(1, stage.y_tiles - 1):
        perimeter.append(Vector(0, y))
        perimeter.append(Vector(stage.x_tiles - 1, y))
    holes = set(stage.wall_holes)
    blocks = [cell for cell in perimeter if cell not in holes]
    blocks.extend(stage.blocks)
    return blocks


def direction_offset(direction: Direction) -> Vector:
    """Unit step for ``direction``.

    Raises ``ValueError`` for anything outside the four headings; picking a
    default would shift every later random draw relative to a recorded log.
    """
    try:
        return _OFFSETS[direction]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"unexpected direction: {direction!r}") from exc


def wrap_position(position: Vector, x_tiles: int, y_tiles: int) -> Vector:
    """Carry a position that left the board to the opposite edge."""
    x, y = position.x, position.y
    if x < 0:
        x = x_tiles - 1
    elif x > x_tiles - 1:
        x = 0
    if y < 0:
        y = y_tiles - 1
    elif y > y_tiles - 1:
        y = 0
    return Vector(x, y)


def apply_apple_effect(snake: SnakeState, apple_type: AppleType) -> None:
    """Update ``target_length`` for an eaten apple."""
    match apple_type:
        case AppleType.NORMAL:
            snake.target_length += NORMAL_APPLE_GROWTH
        case AppleType.DIET:
            snake.target_length = max(
                MIN_SNAKE_LENGTH, math.floor(snake.target_length * DIET_APPLE_FACTOR)
            )
        case _:
            raise ValueError(f"unexpected apple type: {apple_type!r}")


def approach_length(snake: SnakeState) -> None:
    """Move ``length`` one unit towards ``target_length``."""
    if snake.length < snake.target_length:
        snake.length += 1
    elif snake.length > snake.target_length:
        snake.length -= 1


def trim_tiles(snake: SnakeState) -> None:
    """Drop the oldest tiles until the trail fits ``length``."""
    excess = len(snake.tiles) - snake.length
    if excess > 0:
        del snake.tiles[:excess]


def accepts_direction(snake: SnakeState, new_dir: Direction, max_pending: int) -> bool:
    """Whether a turn request can be queued for ``snake``.

    Repeats and reversals of either the current heading or the last queued
    heading are refused, as is anything beyond ``max_pending`` queued turns.
    """
    if len(snake.pending_dirs) >= max_pending:
        return False
    references = [snake.dir]
    if snake.pending_dirs:
        references.append(snake.pending_dirs[-1])
    return all(ref != new_dir and not ref.is_opposite(new_dir) for ref in references)
