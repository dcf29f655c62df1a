"""Game inputs and the timestamped events that make up a replay log.

The dict codecs produce the wire shape used by session files::

    {"eventTime": 1250, "gameInput": {"inputType": "direction", "dir": 2, "snakeIdx": 0}}
    {"eventTime": 1300, "gameInput": {"inputType": "speed", "speedIncrement": -1}}
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Literal, TypeAlias

from snake_replay.domain.state import Direction


@dataclass(frozen=True)
class DirectionInput:
    """Request that snake ``snake_idx`` turn towards ``dir``."""

    dir: Direction
    snake_idx: int
    input_type: Literal["direction"] = "direction"

    def __post_init__(self) -> None:
        if not isinstance(self.dir, Direction):
            object.__setattr__(self, "dir", Direction.parse(self.dir))
        if isinstance(self.snake_idx, bool) or not isinstance(self.snake_idx, int):
            raise ValueError(f"snake_idx must be an integer: {self.snake_idx!r}")
        if self.snake_idx < 0:
            raise ValueError("snake_idx must be >= 0")


@dataclass(frozen=True)
class SpeedInput:
    """Request a relative change of the engine speed."""

    speed_increment: int
    input_type: Literal["speed"] = "speed"

    def __post_init__(self) -> None:
        if isinstance(self.speed_increment, bool) or not isinstance(self.speed_increment, int):
            raise ValueError(f"speed_increment must be an integer: {self.speed_increment!r}")


GameInput: TypeAlias = DirectionInput | SpeedInput


@dataclass(frozen=True)
class InputEvent:
    """An accepted input stamped with the simulated time it was applied at.

    ``event_time`` is exact simulated milliseconds since the session started.
    """

    event_time: Fraction
    game_input: GameInput


# ---------------------------------------------------------------------------
# Dict codecs
# ---------------------------------------------------------------------------


def encode_time(value: Fraction) -> int | float | str:
    """Encode an exact time as a JSON number, or a ``"p/q"`` string if inexact."""
    if value.denominator == 1:
        return value.numerator
    as_float = float(value)
    if Fraction(as_float) == value:
        return as_float
    return f"{value.numerator}/{value.denominator}"


def decode_time(raw: object) -> Fraction:
    """Decode a time written by :func:`encode_time`."""
    if isinstance(raw, bool):
        raise ValueError(f"invalid event time: {raw!r}")
    if isinstance(raw, float) and not math.isfinite(raw):
        raise ValueError(f"event time must be finite: {raw!r}")
    if isinstance(raw, (int, float, str)):
        try:
            value = Fraction(raw)
        except (ValueError, ZeroDivisionError) as exc:
            raise ValueError(f"invalid event time: {raw!r}") from exc
        if value < 0:
            raise ValueError(f"event time must be >= 0: {raw!r}")
        return value
    raise ValueError(f"invalid event time: {raw!r}")


def input_to_dict(game_input: GameInput) -> dict[str, object]:
    match game_input:
        case DirectionInput(dir=direction, snake_idx=snake_idx):
            return {"inputType": "direction", "dir": int(direction), "snakeIdx": snake_idx}
        case SpeedInput(speed_increment=increment):
            return {"inputType": "speed", "speedIncrement": increment}
    raise TypeError(f"not a game input: {game_input!r}")


def input_from_dict(raw: dict[str, object]) -> GameInput:
    input_type = raw.get("inputType")
    if input_type == "direction":
        return DirectionInput(
            dir=Direction.parse(raw.get("dir")),
            snake_idx=raw.get("snakeIdx"),  # type: ignore[arg-type]
        )
    if input_type == "speed":
        return SpeedInput(speed_increment=raw.get("speedIncrement"))  # type: ignore[arg-type]
    raise ValueError(f"inputType must be 'direction' or 'speed': {input_type!r}")


def event_to_dict(event: InputEvent) -> dict[str, object]:
    return {
        "eventTime": encode_time(event.event_time),
        "gameInput": input_to_dict(event.game_input),
    }


def event_from_dict(raw: dict[str, object]) -> InputEvent:
    game_input = raw.get("gameInput")
    if not isinstance(game_input, dict):
        raise ValueError("gameInput must be an object")
    return InputEvent(
        event_time=decode_time(raw.get("eventTime")),
        game_input=input_from_dict(game_input),
    )
