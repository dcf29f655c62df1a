"""Host loop: owns the active driver and switches between live and playback.

The session is driven by a millisecond clock. Every frame (``tick``) and
every input first advances the active driver to "now", so inputs are
stamped at the simulated time they were actually made. Playback falls back
to live mode automatically once the recorded log is exhausted.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from snake_replay.config.stages import default_stage
from snake_replay.config.types import StageConfig
from snake_replay.domain.inputs import GameInput
from snake_replay.domain.state import SimulationState
from snake_replay.interfaces import Actor, KeyMapper, Renderer
from snake_replay.replay.handlers import GameHandler, LiveHandler, PlaybackHandler

logger = logging.getLogger(__name__)

PLAYBACK_KEY = "p"
RESTART_KEY = "n"


def _perf_clock_ms() -> float:
    return time.perf_counter() * 1000.0


class GameSession:
    """Frame-driven front end over a ``LiveHandler`` or ``PlaybackHandler``."""

    def __init__(
        self,
        stage: StageConfig | None = None,
        *,
        clock: Callable[[], float] = _perf_clock_ms,
        stage_factory: Callable[[], StageConfig] = default_stage,
        actors: Sequence[Actor] = (),
        renderer: Renderer | None = None,
        key_mapper: KeyMapper | None = None,
    ) -> None:
        self._clock = clock
        self._stage_factory = stage_factory
        self._actors = list(actors)
        self._renderer = renderer
        self._key_mapper = key_mapper
        self._playback_mode = False
        self._handler: GameHandler = LiveHandler(stage or stage_factory())
        self._last_engine_time = clock()

    @property
    def handler(self) -> GameHandler:
        return self._handler

    @property
    def state(self) -> SimulationState:
        return self._handler.state

    @property
    def playback_mode(self) -> bool:
        return self._playback_mode

    @property
    def x_tiles(self) -> int:
        return self._handler.game_stage.x_tiles

    @property
    def y_tiles(self) -> int:
        return self._handler.game_stage.y_tiles

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Advance to now, poll actors, then hand the state to the renderer."""
        self._advance_time_to_now()
        for actor in self._actors:
            game_input = actor.on_state_update(self._handler.state)
            if game_input is not None:
                self.perform_input(game_input)
        if self._renderer is not None:
            self._renderer.render(self._handler.state, self._playback_mode)

    def perform_input(self, game_input: GameInput) -> None:
        self._advance_time_to_now()
        self._handler.perform_input(game_input)

    def handle_key(self, key: str) -> bool:
        """Dispatch a key press; returns whether it was consumed."""
        normalized = key.lower()
        if normalized == PLAYBACK_KEY:
            self.toggle_playback()
            return True
        if normalized == RESTART_KEY:
            self.restart()
            return True
        if self._key_mapper is None:
            return False
        game_input = self._key_mapper.map_key(key)
        if game_input is None:
            return False
        self.perform_input(game_input)
        return True

    def _advance_time_to_now(self) -> None:
        now = self._clock()
        self._handler.advance_time(now - self._last_engine_time)
        self._last_engine_time = now
        if self._playback_mode and self._handler.is_done:
            self.resume_live()

    # ------------------------------------------------------------------
    # Mode switching
    # ------------------------------------------------------------------

    def toggle_playback(self) -> None:
        if self._playback_mode:
            self.resume_live()
        else:
            self.enter_playback()

    def enter_playback(self) -> None:
        logger.debug("entering playback of %d inputs", len(self._handler.saved_inputs))
        self._playback_mode = True
        self._handler = PlaybackHandler(self._handler.game_stage, self._handler.saved_inputs)
        self._last_engine_time = self._clock()

    def resume_live(self) -> None:
        logger.debug("resuming live mode")
        self._playback_mode = False
        self._handler = LiveHandler(self._handler.game_stage, self._handler.saved_inputs)

    def restart(self, stage: StageConfig | None = None) -> None:
        """Start a brand-new live game, discarding the recorded log."""
        self._playback_mode = False
        self._handler = LiveHandler(stage or self._stage_factory())
        self._last_engine_time = self._clock()
