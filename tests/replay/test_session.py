"""Tests for the frame-driven host session."""

from __future__ import annotations

from fractions import Fraction

from snake_replay.config.stages import open_stage
from snake_replay.domain.inputs import DirectionInput, GameInput, SpeedInput
from snake_replay.domain.state import Direction, SimulationState
from snake_replay.replay.handlers import LiveHandler, PlaybackHandler
from snake_replay.replay.session import GameSession


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames: list[tuple[SimulationState, bool]] = []

    def render(self, state: SimulationState, playback_mode: bool) -> None:
        self.frames.append((state, playback_mode))


class WasdMapper:
    _KEYS = {"w": Direction.UP, "s": Direction.DOWN, "a": Direction.LEFT, "d": Direction.RIGHT}

    def map_key(self, key: str) -> GameInput | None:
        direction = self._KEYS.get(key)
        if direction is None:
            return None
        return DirectionInput(dir=direction, snake_idx=0)


class AlwaysUp:
    def on_state_update(self, state: SimulationState) -> DirectionInput | None:
        return DirectionInput(dir=Direction.UP, snake_idx=0)


def _session(clock: FakeClock, **kwargs: object) -> GameSession:
    return GameSession(
        open_stage(21, 21, seed=4),
        clock=clock,
        stage_factory=lambda: open_stage(21, 21, seed=99),
        **kwargs,  # type: ignore[arg-type]
    )


class TestLiveMode:
    def test_tick_advances_by_clock_delta(self) -> None:
        clock = FakeClock()
        session = _session(clock)
        clock.now = 500.0
        session.tick()
        assert isinstance(session.handler, LiveHandler)
        assert session.handler.total_duration == 500
        assert session.x_tiles == session.y_tiles == 21

    def test_input_is_stamped_at_now(self) -> None:
        clock = FakeClock()
        session = _session(clock)
        clock.now = 250.0
        session.perform_input(SpeedInput(speed_increment=1))
        assert session.handler.saved_inputs[0].event_time == Fraction(250)

    def test_renderer_and_actors_polled_each_tick(self) -> None:
        clock = FakeClock()
        renderer = RecordingRenderer()
        session = _session(clock, actors=[AlwaysUp()], renderer=renderer)
        clock.now = 100.0
        session.tick()
        clock.now = 200.0
        session.tick()
        assert [mode for _, mode in renderer.frames] == [False, False]
        # Repeated UP requests are rejected once the first is queued or applied.
        assert len(session.handler.saved_inputs) == 1


class TestKeys:
    def test_mapped_key_becomes_input(self) -> None:
        clock = FakeClock()
        session = _session(clock, key_mapper=WasdMapper())
        assert session.handle_key("w")
        assert session.state.snakes[0].pending_dirs == [Direction.UP]
        assert not session.handle_key("x")

    def test_unmapped_key_without_mapper(self) -> None:
        session = _session(FakeClock())
        assert not session.handle_key("w")

    def test_restart_discards_log_and_reseeds(self) -> None:
        clock = FakeClock()
        session = _session(clock)
        session.perform_input(SpeedInput(speed_increment=1))
        assert session.handle_key("N")
        assert session.handler.saved_inputs == []
        assert session.handler.game_stage.seed == 99
        assert not session.playback_mode


class TestPlaybackMode:
    def test_toggle_enters_playback_from_start(self) -> None:
        clock = FakeClock()
        session = _session(clock)
        clock.now = 600.0
        session.perform_input(DirectionInput(dir=Direction.UP, snake_idx=0))

        assert session.handle_key("p")
        assert session.playback_mode
        assert isinstance(session.handler, PlaybackHandler)
        assert session.handler.total_duration == 0

    def test_playback_ignores_input(self) -> None:
        clock = FakeClock()
        session = _session(clock)
        clock.now = 600.0
        session.perform_input(SpeedInput(speed_increment=1))
        session.enter_playback()
        clock.now = 700.0
        session.perform_input(SpeedInput(speed_increment=5))
        assert session.state.speed == 12
        assert len(session.handler.saved_inputs) == 1

    def test_auto_resumes_live_when_log_exhausted(self) -> None:
        clock = FakeClock()
        session = _session(clock)
        clock.now = 600.0
        session.perform_input(DirectionInput(dir=Direction.UP, snake_idx=0))
        recorded = LiveHandler(session.handler.game_stage, session.handler.saved_inputs)

        session.toggle_playback()
        clock.now = 700.0
        session.tick()
        assert session.playback_mode

        clock.now = 1300.0
        session.tick()
        assert not session.playback_mode
        assert isinstance(session.handler, LiveHandler)
        assert session.handler.total_duration == 600
        assert session.state == recorded.state

    def test_toggle_twice_returns_to_live_with_log(self) -> None:
        clock = FakeClock()
        session = _session(clock)
        clock.now = 300.0
        session.perform_input(SpeedInput(speed_increment=2))
        session.toggle_playback()
        session.toggle_playback()
        assert not session.playback_mode
        assert len(session.handler.saved_inputs) == 1
        assert session.state.speed == 14
