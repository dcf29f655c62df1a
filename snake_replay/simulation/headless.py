"""Headless runner: drive a live session at a fixed time step without a host."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from snake_replay.config.types import HeadlessConfig, StageConfig
from snake_replay.domain.inputs import InputEvent
from snake_replay.domain.vector import Vector
from snake_replay.interfaces import Actor
from snake_replay.io.trace import TraceWriter
from snake_replay.metrics import exploration_coverage
from snake_replay.replay.handlers import LiveHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeadlessResult:
    """Outcome of one headless run."""

    seed: int
    iterations: int
    steps: int
    duration_ms: float
    game_over: bool
    scores: tuple[int, ...]
    lengths: tuple[int, ...]
    cells_visited: tuple[int, ...]
    coverage: tuple[float, ...]
    inputs: tuple[InputEvent, ...]

    def to_summary(self) -> dict[str, object]:
        return {
            "seed": self.seed,
            "iterations": self.iterations,
            "steps": self.steps,
            "duration_ms": self.duration_ms,
            "game_over": self.game_over,
            "scores": list(self.scores),
            "lengths": list(self.lengths),
            "cells_visited": list(self.cells_visited),
            "coverage": list(self.coverage),
            "inputs": len(self.inputs),
        }


def run_headless(
    stage: StageConfig,
    actors: Sequence[Actor] = (),
    config: HeadlessConfig | None = None,
    trace: TraceWriter | None = None,
) -> HeadlessResult:
    """Poll actors, apply their inputs and advance one time step per iteration.

    Stops on game over or after ``config.max_steps`` iterations. Inputs are
    recorded by a ``LiveHandler`` so the run can be saved and replayed.
    """
    run_config = config or HeadlessConfig()
    handler = LiveHandler(stage)
    visited: list[set[Vector]] = [set() for _ in stage.snakes]

    if trace is not None:
        trace.record(handler.state, handler.total_duration)

    iterations = 0
    steps = 0
    while not handler.state.game_over and iterations < run_config.max_steps:
        for actor in actors:
            game_input = actor.on_state_update(handler.state)
            if game_input is not None:
                handler.perform_input(game_input)
        steps += handler.advance_time(run_config.time_step_ms)
        iterations += 1

        for snake_idx, snake in enumerate(handler.state.snakes):
            visited[snake_idx].update(snake.tiles)
        if trace is not None:
            trace.record(handler.state, handler.total_duration)

    state = handler.state
    logger.debug(
        "headless run seed=%d finished after %d iterations (game_over=%s)",
        stage.seed,
        iterations,
        state.game_over,
    )
    return HeadlessResult(
        seed=stage.seed,
        iterations=iterations,
        steps=steps,
        duration_ms=float(handler.total_duration),
        game_over=state.game_over,
        scores=tuple(snake.score for snake in state.snakes),
        lengths=tuple(snake.length for snake in state.snakes),
        cells_visited=tuple(len(cells) for cells in visited),
        coverage=tuple(
            exploration_coverage(cells, state, stage.x_tiles, stage.y_tiles) for cells in visited
        ),
        inputs=tuple(handler.saved_inputs),
    )
