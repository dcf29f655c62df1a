"""Replay harness: live/playback drivers and the host session loop."""

from snake_replay.replay.handlers import GameHandler, LiveHandler, PlaybackHandler
from snake_replay.replay.session import GameSession

__all__ = [
    "GameHandler",
    "GameSession",
    "LiveHandler",
    "PlaybackHandler",
]
