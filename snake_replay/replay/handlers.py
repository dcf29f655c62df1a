"""Live and playback drivers over a simulation engine.

Both drivers satisfy the ``GameHandler`` protocol and each owns its own
``SimulationEngine``; neither shares state with the other. A recorded
``saved_inputs`` log plus the stage it was recorded on is enough to rebuild
any moment of a session:

- ``LiveHandler`` records every accepted input and, when given a log,
  fast-forwards through it before accepting new input.
- ``PlaybackHandler`` re-runs a log on a fresh engine, injecting each input
  at the exact simulated time it was originally applied.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from fractions import Fraction
from typing import Protocol, runtime_checkable

from snake_replay.config.types import StageConfig
from snake_replay.domain.inputs import GameInput, InputEvent
from snake_replay.domain.state import SimulationState
from snake_replay.simulation.engine import SimulationEngine, exact_duration

logger = logging.getLogger(__name__)


@runtime_checkable
class GameHandler(Protocol):
    """Contract the host loop drives, independent of live or playback mode."""

    @property
    def game_stage(self) -> StageConfig: ...

    @property
    def state(self) -> SimulationState: ...

    @property
    def saved_inputs(self) -> list[InputEvent]: ...

    @property
    def is_done(self) -> bool: ...

    def advance_time(self, duration: float | Fraction) -> int: ...

    def perform_input(self, game_input: GameInput) -> None: ...


class LiveHandler:
    """Forwards time and input to an engine, recording accepted inputs."""

    def __init__(
        self, game_stage: StageConfig, saved_inputs: Sequence[InputEvent] | None = None
    ) -> None:
        self._game_stage = game_stage
        self._saved_inputs: list[InputEvent] = list(saved_inputs or [])
        self._engine = SimulationEngine(game_stage)

        if self._saved_inputs:
            logger.debug("fast-forwarding through %d saved inputs", len(self._saved_inputs))
        for event in self._saved_inputs:
            if event.event_time < self._engine.total_duration:
                raise ValueError("saved inputs must be in chronological order")
            self._engine.advance_time(event.event_time - self._engine.total_duration)
            self._engine.input(event.game_input)

        # Registered after the fast-forward so replayed inputs are not logged twice.
        self._engine.on_input_callback = self._saved_inputs.append

    @property
    def game_stage(self) -> StageConfig:
        return self._game_stage

    @property
    def state(self) -> SimulationState:
        return self._engine.state

    @property
    def saved_inputs(self) -> list[InputEvent]:
        return self._saved_inputs

    @property
    def total_duration(self) -> Fraction:
        return self._engine.total_duration

    @property
    def is_done(self) -> bool:
        return False

    def advance_time(self, duration: float | Fraction) -> int:
        return self._engine.advance_time(duration)

    def perform_input(self, game_input: GameInput) -> None:
        self._engine.input(game_input)


class PlaybackHandler:
    """Replays a fixed input log on a freshly seeded engine.

    ``perform_input`` is ignored; the log is the only source of input.
    """

    def __init__(self, game_stage: StageConfig, saved_inputs: Sequence[InputEvent]) -> None:
        self._game_stage = game_stage
        self._saved_inputs: list[InputEvent] = list(saved_inputs)
        self._engine = SimulationEngine(game_stage)
        self._input_index = 0

    @property
    def game_stage(self) -> StageConfig:
        return self._game_stage

    @property
    def state(self) -> SimulationState:
        return self._engine.state

    @property
    def saved_inputs(self) -> list[InputEvent]:
        return self._saved_inputs

    @property
    def total_duration(self) -> Fraction:
        return self._engine.total_duration

    @property
    def is_done(self) -> bool:
        return self._input_index >= len(self._saved_inputs)

    def advance_time(self, duration: float | Fraction) -> int:
        """Advance by ``duration``, stopping at each logged event on the way.

        Every event whose time falls within the requested span is applied
        at exactly its recorded time. Once the log is exhausted the rest of
        the span is not simulated. Returns the number of steps executed.
        """
        if self.is_done:
            return 0
        steps = 0
        target = self._engine.total_duration + exact_duration(duration)
        while not self.is_done:
            event = self._saved_inputs[self._input_index]
            if event.event_time > target:
                break
            if event.event_time < self._engine.total_duration:
                raise ValueError("saved inputs must be in chronological order")
            steps += self._engine.advance_time(event.event_time - self._engine.total_duration)
            self._engine.input(event.game_input)
            self._input_index += 1
        else:
            logger.debug("playback finished at %s ms", self._engine.total_duration)
            return steps
        return steps + self._engine.advance_time(target - self._engine.total_duration)

    def perform_input(self, game_input: GameInput) -> None:
        return None
