"""JSON encoding of a recorded session: the stage plus its input log.

The input array is written in chronological order; that order is the only
contract a replay needs.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from snake_replay.config.types import SnakeStart, StageConfig
from snake_replay.domain.inputs import InputEvent, event_from_dict, event_to_dict
from snake_replay.domain.state import Direction
from snake_replay.domain.vector import Vector
from snake_replay.io.schemas import SESSION_SCHEMA_VERSION


@dataclass(frozen=True)
class RecordedSession:
    """A stage and the inputs accepted while playing it."""

    stage: StageConfig
    inputs: tuple[InputEvent, ...]


def stage_to_dict(stage: StageConfig) -> dict[str, object]:
    return {
        "xTiles": stage.x_tiles,
        "yTiles": stage.y_tiles,
        "seed": stage.seed,
        "wallHoles": [hole.to_list() for hole in stage.wall_holes],
        "blocks": [block.to_list() for block in stage.blocks],
        "snakes": [
            {"position": snake.position.to_list(), "direction": int(snake.direction)}
            for snake in stage.snakes
        ],
    }


def stage_from_dict(raw: dict[str, object]) -> StageConfig:
    snakes_raw = raw.get("snakes")
    if not isinstance(snakes_raw, list):
        raise ValueError("stage.snakes must be a list")
    snakes = []
    for snake in snakes_raw:
        if not isinstance(snake, dict):
            raise ValueError("stage.snakes entries must be objects")
        snakes.append(
            SnakeStart(
                position=Vector.from_sequence(snake.get("position")),
                direction=Direction.parse(snake.get("direction")),
            )
        )
    return StageConfig(
        x_tiles=raw.get("xTiles"),  # type: ignore[arg-type]
        y_tiles=raw.get("yTiles"),  # type: ignore[arg-type]
        seed=raw.get("seed"),  # type: ignore[arg-type]
        snakes=tuple(snakes),
        wall_holes=tuple(Vector.from_sequence(v) for v in _as_list(raw, "wallHoles")),
        blocks=tuple(Vector.from_sequence(v) for v in _as_list(raw, "blocks")),
    )


def _as_list(raw: dict[str, object], key: str) -> list[object]:
    value = raw.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"stage.{key} must be a list")
    return value


def session_to_dict(stage: StageConfig, inputs: Sequence[InputEvent]) -> dict[str, object]:
    return {
        "schema_version": SESSION_SCHEMA_VERSION,
        "stage": stage_to_dict(stage),
        "inputs": [event_to_dict(event) for event in inputs],
    }


def session_from_dict(raw: dict[str, object]) -> RecordedSession:
    version = raw.get("schema_version")
    if version != SESSION_SCHEMA_VERSION:
        raise ValueError(
            f"unsupported session schema_version {version!r}; expected {SESSION_SCHEMA_VERSION}"
        )
    stage_raw = raw.get("stage")
    inputs_raw = raw.get("inputs")
    if not isinstance(stage_raw, dict):
        raise ValueError("session.stage must be an object")
    if not isinstance(inputs_raw, list):
        raise ValueError("session.inputs must be a list")
    events = []
    for entry in inputs_raw:
        if not isinstance(entry, dict):
            raise ValueError("session.inputs entries must be objects")
        events.append(event_from_dict(entry))
    for earlier, later in zip(events, events[1:]):
        if later.event_time < earlier.event_time:
            raise ValueError("session.inputs must be in chronological order")
    return RecordedSession(stage=stage_from_dict(stage_raw), inputs=tuple(events))


def save_session(path: Path, stage: StageConfig, inputs: Sequence[InputEvent]) -> Path:
    """Write a session file, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = session_to_dict(stage, inputs)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def load_session(path: Path) -> RecordedSession:
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("session file must contain a JSON object")
    return session_from_dict(raw)
