"""Persistence layer: session JSON files and Parquet frame traces."""

from snake_replay.io.session_file import (
    RecordedSession,
    load_session,
    save_session,
    session_from_dict,
    session_to_dict,
)
from snake_replay.io.trace import TraceWriter

__all__ = [
    "RecordedSession",
    "TraceWriter",
    "load_session",
    "save_session",
    "session_from_dict",
    "session_to_dict",
]
