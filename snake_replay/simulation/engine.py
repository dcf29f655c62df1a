"""Deterministic fixed-step simulation engine.

The engine owns its ``SimulationState``, a seeded ``random.Random`` stream
and an exact time accumulator. Wall-clock frames of any length are turned
into whole discrete steps; identical call sequences on identically seeded
engines always produce identical states.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from fractions import Fraction
from random import Random
from typing import assert_never

from snake_replay.config.constants import (
    INITIAL_SNAKE_LENGTH,
    INITIAL_SPEED,
    MAX_PENDING_DIRS,
    MAX_SPEED,
    MIN_SPEED,
    NORMAL_APPLE_PROBABILITY,
)
from snake_replay.config.types import StageConfig
from snake_replay.domain.inputs import DirectionInput, GameInput, InputEvent, SpeedInput
from snake_replay.domain.state import Apple, AppleType, SimulationState, SnakeState
from snake_replay.domain.vector import Vector
from snake_replay.simulation.rules import (
    accepts_direction,
    apply_apple_effect,
    approach_length,
    build_blocks,
    direction_offset,
    trim_tiles,
    wrap_position,
)

logger = logging.getLogger(__name__)

InputCallback = Callable[[InputEvent], None]


def exact_duration(duration: object) -> Fraction:
    """Convert a millisecond duration to an exact, non-negative Fraction."""
    if isinstance(duration, bool) or not isinstance(duration, (int, float, Fraction)):
        raise ValueError(f"duration must be a number: {duration!r}")
    if isinstance(duration, float) and not math.isfinite(duration):
        raise ValueError(f"duration must be finite: {duration!r}")
    exact = Fraction(duration)
    if exact < 0:
        raise ValueError(f"duration must be >= 0: {duration!r}")
    return exact


class SimulationEngine:
    """Seeded snake simulation advanced by wall-clock durations.

    Example::

        engine = SimulationEngine(stage)
        engine.input(DirectionInput(Direction.UP, snake_idx=0))
        engine.advance_time(16)
    """

    def __init__(self, stage: StageConfig) -> None:
        self._stage = stage
        self.on_input_callback: InputCallback | None = None
        self._rng = Random(stage.seed)
        self._pending_duration = Fraction(0)
        self._total_duration = Fraction(0)
        self._state = self._create_initial_state()
        self._block_set = frozenset(self._state.blocks)

    @property
    def stage(self) -> StageConfig:
        return self._stage

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def total_duration(self) -> Fraction:
        """Cumulative simulated milliseconds."""
        return self._total_duration

    def reset(self) -> None:
        """Re-seed the random stream and rebuild the initial state."""
        self._rng = Random(self._stage.seed)
        self._pending_duration = Fraction(0)
        self._total_duration = Fraction(0)
        self._state = self._create_initial_state()
        self._block_set = frozenset(self._state.blocks)

    def _create_initial_state(self) -> SimulationState:
        return SimulationState(
            blocks=build_blocks(self._stage),
            speed=INITIAL_SPEED,
            snakes=[
                SnakeState(
                    position=start.position,
                    dir=start.direction,
                    length=INITIAL_SNAKE_LENGTH,
                    target_length=INITIAL_SNAKE_LENGTH,
                )
                for start in self._stage.snakes
            ],
        )

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def input(self, game_input: GameInput) -> bool:
        """Apply an input; returns whether it was accepted.

        Accepted inputs are reported to ``on_input_callback`` stamped with
        the current ``total_duration``.
        """
        match game_input:
            case DirectionInput():
                handled = self._action_new_dir(game_input)
            case SpeedInput():
                handled = self._action_speed_change(game_input)
            case _:
                assert_never(game_input)

        if handled and self.on_input_callback is not None:
            self.on_input_callback(
                InputEvent(event_time=self._total_duration, game_input=game_input)
            )
        return handled

    def _action_new_dir(self, game_input: DirectionInput) -> bool:
        if game_input.snake_idx >= len(self._state.snakes):
            raise ValueError(
                f"snake_idx {game_input.snake_idx} out of range for "
                f"{len(self._state.snakes)} snakes"
            )
        snake = self._state.snakes[game_input.snake_idx]
        if not accepts_direction(snake, game_input.dir, MAX_PENDING_DIRS):
            return False
        snake.pending_dirs.append(game_input.dir)
        return True

    def _action_speed_change(self, game_input: SpeedInput) -> bool:
        new_speed = self._state.speed + game_input.speed_increment
        self._state.speed = max(MIN_SPEED, min(MAX_SPEED, new_speed))
        return True

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def advance_time(self, duration: float | Fraction) -> int:
        """Advance simulated time and run every whole step that fits.

        Speed is read once per call, so a speed change only affects later
        calls. Returns the number of steps executed.
        """
        exact = exact_duration(duration)
        self._total_duration += exact
        self._pending_duration += exact

        step_size = Fraction(1000) / Fraction(self._state.speed)
        total_steps = math.floor(self._pending_duration / step_size)
        for _ in range(total_steps):
            self._step()
        self._pending_duration -= total_steps * step_size
        return total_steps

    # ------------------------------------------------------------------
    # Step
    # ------------------------------------------------------------------

    def _collides_with_other_snake(self, snake_idx: int, position: Vector) -> bool:
        return any(
            other.occupies(position)
            for j, other in enumerate(self._state.snakes)
            if j != snake_idx
        )

    def _end_game(self, snake_idx: int, position: Vector, cause: str) -> None:
        self._state.game_over = True
        logger.debug("game over: snake %d hit %s at %s", snake_idx, cause, position)

    def _step(self) -> None:
        """One discrete tick: move every snake in order, then spawn an apple."""
        state = self._state
        if state.game_over:
            return

        for i, snake in enumerate(state.snakes):
            if snake.pending_dirs:
                snake.dir = snake.pending_dirs.pop(0)

            candidate = snake.position + direction_offset(snake.dir)

            if self._collides_with_other_snake(i, candidate):
                self._end_game(i, candidate, "another snake")
                return
            if candidate in self._block_set:
                self._end_game(i, candidate, "a block")
                return
            if snake.occupies(candidate):
                self._end_game(i, candidate, "itself")
                return

            candidate = wrap_position(candidate, self._stage.x_tiles, self._stage.y_tiles)
            snake.position = candidate
            snake.tiles.append(candidate)

            if state.apple is not None and snake.position == state.apple.position:
                apply_apple_effect(snake, state.apple.type)
                state.apple = None
                snake.score += 1

            approach_length(snake)
            trim_tiles(snake)

            # A snake moved earlier this tick may already sit on the committed cell.
            if self._collides_with_other_snake(i, snake.position):
                self._end_game(i, snake.position, "another snake")
                return

        if state.apple is None:
            self._spawn_apple()

    def _spawn_apple(self) -> None:
        """Place a new apple. Draw order: x, y (repeated on rejection), then type."""
        state = self._state
        occupied = self._block_set.union(*(snake.tiles for snake in state.snakes))
        if len(occupied) >= self._stage.x_tiles * self._stage.y_tiles:
            # Board is full; drawing would never terminate.
            return
        while True:
            position = Vector(
                math.floor(self._rng.random() * self._stage.x_tiles),
                math.floor(self._rng.random() * self._stage.y_tiles),
            )
            if position not in occupied:
                break

        apple_type = (
            AppleType.NORMAL if self._rng.random() < NORMAL_APPLE_PROBABILITY else AppleType.DIET
        )
        state.apple = Apple(position=position, type=apple_type)
