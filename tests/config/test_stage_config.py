from __future__ import annotations

import pytest

from snake_replay.config.constants import (
    DEFAULT_ARENA_HEIGHT,
    DEFAULT_ARENA_WIDTH,
    INITIAL_SPEED,
    MAX_PENDING_DIRS,
    MAX_SPEED,
    MIN_SPEED,
    NORMAL_APPLE_PROBABILITY,
)
from snake_replay.config.stages import default_stage, open_stage
from snake_replay.config.types import HeadlessConfig, SnakeStart, StageConfig
from snake_replay.domain.state import Direction
from snake_replay.domain.vector import Vector


def test_speed_bounds_contain_initial_speed() -> None:
    assert MIN_SPEED <= INITIAL_SPEED <= MAX_SPEED


def test_pending_queue_bound_and_probability() -> None:
    assert MAX_PENDING_DIRS == 2
    assert 0.0 < NORMAL_APPLE_PROBABILITY < 1.0


class TestDefaultStage:
    def test_layout(self) -> None:
        stage = default_stage(seed=5)
        assert (stage.x_tiles, stage.y_tiles) == (DEFAULT_ARENA_WIDTH, DEFAULT_ARENA_HEIGHT)
        assert stage.wall_holes == (
            Vector(0, 20),
            Vector(0, 21),
            Vector(59, 20),
            Vector(59, 21),
        )
        assert set(stage.blocks) == {Vector(29, 19), Vector(30, 19), Vector(29, 20), Vector(30, 20)}
        assert stage.snakes == (
            SnakeStart(Vector(4, 4), Direction.RIGHT),
            SnakeStart(Vector(56, 36), Direction.LEFT),
        )

    def test_seed_from_clock_when_omitted(self) -> None:
        assert isinstance(default_stage().seed, int)

    def test_with_seed_keeps_layout(self) -> None:
        stage = default_stage(seed=5)
        reseeded = stage.with_seed(6)
        assert reseeded.seed == 6
        assert reseeded.blocks == stage.blocks
        assert reseeded.snakes == stage.snakes


class TestStageValidation:
    def test_lists_are_stored_as_tuples(self) -> None:
        stage = StageConfig(
            x_tiles=5,
            y_tiles=5,
            seed=0,
            snakes=[SnakeStart(Vector(2, 2), Direction.UP)],  # type: ignore[arg-type]
            blocks=[Vector(3, 3)],  # type: ignore[arg-type]
        )
        assert isinstance(stage.snakes, tuple)
        assert isinstance(stage.blocks, tuple)
        hash(stage)

    def test_snake_start_coerces_direction(self) -> None:
        assert SnakeStart(Vector(1, 1), "down").direction is Direction.DOWN  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"x_tiles": 2},
            {"seed": 1.5},
            {"seed": True},
            {"snakes": ()},
            {"snakes": (SnakeStart(Vector(9, 9), Direction.UP),)},
            {"wall_holes": (Vector(2, 2),)},
            {"blocks": (Vector(5, 0),)},
        ],
    )
    def test_rejects_invalid(self, kwargs: dict[str, object]) -> None:
        base: dict[str, object] = {
            "x_tiles": 5,
            "y_tiles": 5,
            "seed": 0,
            "snakes": (SnakeStart(Vector(2, 2), Direction.UP),),
        }
        base.update(kwargs)
        with pytest.raises(ValueError):
            StageConfig(**base)  # type: ignore[arg-type]

    def test_open_stage_centres_snake(self) -> None:
        stage = open_stage(9, 7, seed=0)
        assert stage.snakes[0].position == Vector(4, 3)
        assert stage.wall_holes == ()


class TestHeadlessConfig:
    def test_defaults_valid(self) -> None:
        config = HeadlessConfig()
        assert config.time_step_ms > 0
        assert config.max_steps >= 1

    @pytest.mark.parametrize("kwargs", [{"time_step_ms": 0}, {"max_steps": 0}])
    def test_rejects_invalid(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(ValueError):
            HeadlessConfig(**kwargs)  # type: ignore[arg-type]
