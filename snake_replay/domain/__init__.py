"""Domain layer: coordinates, world state, and game inputs."""

from snake_replay.domain.inputs import (
    DirectionInput,
    GameInput,
    InputEvent,
    SpeedInput,
    event_from_dict,
    event_to_dict,
    input_from_dict,
    input_to_dict,
)
from snake_replay.domain.state import (
    Apple,
    AppleType,
    Direction,
    SimulationState,
    SnakeState,
)
from snake_replay.domain.vector import Vector

__all__ = [
    "Apple",
    "AppleType",
    "Direction",
    "DirectionInput",
    "GameInput",
    "InputEvent",
    "SimulationState",
    "SnakeState",
    "SpeedInput",
    "Vector",
    "event_from_dict",
    "event_to_dict",
    "input_from_dict",
    "input_to_dict",
]
