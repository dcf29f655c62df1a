"""Tests for the Parquet frame trace."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq
import pytest

from snake_replay.config.stages import default_stage
from snake_replay.io.paths import session_path, summary_path, trace_path
from snake_replay.io.schemas import TRACE_COLUMNS, TRACE_SCHEMA
from snake_replay.io.trace import TraceWriter
from snake_replay.simulation.engine import SimulationEngine


def test_one_row_per_snake_per_frame(tmp_path: Path) -> None:
    engine = SimulationEngine(default_stage(seed=2))
    path = tmp_path / "trace.parquet"
    with TraceWriter(path) as trace:
        for _ in range(3):
            engine.advance_time(100)
            trace.record(engine.state, engine.total_duration)
    table = pq.read_table(path)
    assert table.column_names == TRACE_COLUMNS
    assert table.num_rows == 6
    assert trace.rows_written == 6
    assert table.column("frame").to_pylist() == [0, 0, 1, 1, 2, 2]
    assert table.column("snake_idx").to_pylist() == [0, 1, 0, 1, 0, 1]
    assert table.column("time_ms").to_pylist() == [100.0, 100.0, 200.0, 200.0, 300.0, 300.0]


def test_missing_apple_written_as_null(tmp_path: Path) -> None:
    engine = SimulationEngine(default_stage(seed=2))
    path = tmp_path / "trace.parquet"
    with TraceWriter(path) as trace:
        trace.record(engine.state, 0)
    row = pq.read_table(path).to_pylist()[0]
    assert row["apple_x"] is None
    assert row["apple_type"] is None
    assert row["speed"] == 12


def test_small_flush_threshold_streams_all_rows(tmp_path: Path) -> None:
    engine = SimulationEngine(default_stage(seed=2))
    path = tmp_path / "trace.parquet"
    with TraceWriter(path, flush_threshold=3) as trace:
        for _ in range(5):
            engine.advance_time(50)
            trace.record(engine.state, engine.total_duration)
    assert pq.read_table(path).num_rows == 10


def test_empty_trace_is_readable(tmp_path: Path) -> None:
    path = tmp_path / "trace.parquet"
    writer = TraceWriter(path)
    writer.close()
    writer.close()
    table = pq.read_table(path)
    assert table.num_rows == 0
    assert table.schema.equals(TRACE_SCHEMA)


def test_invalid_flush_threshold(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        TraceWriter(tmp_path / "trace.parquet", flush_threshold=0)


def test_output_paths(tmp_path: Path) -> None:
    assert session_path(tmp_path) == tmp_path / "session.json"
    assert trace_path(tmp_path) == tmp_path / "logs" / "trace.parquet"
    assert summary_path(tmp_path) == tmp_path / "logs" / "summary.json"
