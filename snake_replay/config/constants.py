"""Centralized domain constants for the snake simulation.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

INITIAL_SPEED = 12
"""Steps per second for a freshly constructed engine."""

MIN_SPEED = 1
"""Lower clamp for the speed setting."""

MAX_SPEED = 1000
"""Upper clamp for the speed setting."""

INITIAL_SNAKE_LENGTH = 4
"""Starting length and target length of every snake."""

MAX_PENDING_DIRS = 2
"""Maximum number of queued direction changes per snake."""

NORMAL_APPLE_PROBABILITY = 0.9
"""Type draws below this value produce a NORMAL apple, otherwise DIET."""

NORMAL_APPLE_GROWTH = 1
"""Target-length increase when eating a NORMAL apple."""

DIET_APPLE_FACTOR = 0.9
"""Target-length multiplier (floored, minimum 1) when eating a DIET apple."""

MIN_SNAKE_LENGTH = 1
"""Smallest target length a DIET apple can shrink a snake to."""

MIN_BOARD_SIZE = 3
"""Smallest board dimension that leaves an interior inside the wall."""

DEFAULT_FRAME_MS = 1000 / 60
"""Host frame interval used by offline playback (60 frames per second)."""

DEFAULT_ARENA_WIDTH = 60
"""Width of the default arena stage."""

DEFAULT_ARENA_HEIGHT = 40
"""Height of the default arena stage."""

HEADLESS_TIME_STEP_MS = 100
"""Time advanced per headless iteration."""

HEADLESS_MAX_STEPS = 5_000
"""Safety cap on headless iterations per run."""

FLUSH_THRESHOLD = 8_192
"""Flush trace rows to Parquet once this in-memory row count is reached."""
