"""Parquet schema and format-version constants for session artifacts."""

from __future__ import annotations

import pyarrow as pa

SESSION_SCHEMA_VERSION = 1
TRACE_SCHEMA_VERSION = 1

# One row per snake per recorded frame.
TRACE_SCHEMA = pa.schema(
    [
        ("frame", pa.int64()),
        ("time_ms", pa.float64()),
        ("snake_idx", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("length", pa.int64()),
        ("target_length", pa.int64()),
        ("score", pa.int64()),
        ("speed", pa.int64()),
        ("apple_x", pa.int64()),
        ("apple_y", pa.int64()),
        ("apple_type", pa.string()),
        ("game_over", pa.bool_()),
    ]
)

TRACE_COLUMNS = [field.name for field in TRACE_SCHEMA]
