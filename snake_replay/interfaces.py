"""Protocols for the collaborators that sit around the simulation core.

Policies, renderers and key mappings live outside this package; they only
read ``SimulationState`` and produce ``GameInput`` values.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from snake_replay.domain.inputs import DirectionInput, GameInput
from snake_replay.domain.state import SimulationState


@runtime_checkable
class Actor(Protocol):
    """Decides a direction for one snake from the current state.

    Polled once per host frame; ``None`` means keep the current heading.
    """

    def on_state_update(self, state: SimulationState) -> DirectionInput | None: ...


@runtime_checkable
class Renderer(Protocol):
    """Draws a state. Must never mutate it."""

    def render(self, state: SimulationState, playback_mode: bool) -> None: ...


@runtime_checkable
class KeyMapper(Protocol):
    """Translates a raw key name into an input for a human-controlled snake."""

    def map_key(self, key: str) -> GameInput | None: ...
