"""Configuration layer: constants, typed stage config and stage builders."""

from snake_replay.config.constants import (
    DEFAULT_FRAME_MS,
    FLUSH_THRESHOLD,
    INITIAL_SNAKE_LENGTH,
    INITIAL_SPEED,
    MAX_PENDING_DIRS,
    MAX_SPEED,
    MIN_SPEED,
)
from snake_replay.config.stages import default_stage, open_stage
from snake_replay.config.types import HeadlessConfig, SnakeStart, StageConfig

__all__ = [
    "DEFAULT_FRAME_MS",
    "FLUSH_THRESHOLD",
    "HeadlessConfig",
    "INITIAL_SNAKE_LENGTH",
    "INITIAL_SPEED",
    "MAX_PENDING_DIRS",
    "MAX_SPEED",
    "MIN_SPEED",
    "SnakeStart",
    "StageConfig",
    "default_stage",
    "open_stage",
]
