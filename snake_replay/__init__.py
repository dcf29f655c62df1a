"""Deterministic multi-snake simulation with record/replay drivers."""

from snake_replay.config.types import SnakeStart, StageConfig
from snake_replay.domain.inputs import DirectionInput, InputEvent, SpeedInput
from snake_replay.domain.state import AppleType, Direction, SimulationState
from snake_replay.domain.vector import Vector
from snake_replay.replay.handlers import GameHandler, LiveHandler, PlaybackHandler
from snake_replay.simulation.engine import SimulationEngine

__all__ = [
    "AppleType",
    "Direction",
    "DirectionInput",
    "GameHandler",
    "InputEvent",
    "LiveHandler",
    "PlaybackHandler",
    "SimulationEngine",
    "SimulationState",
    "SnakeStart",
    "SpeedInput",
    "StageConfig",
    "Vector",
]
