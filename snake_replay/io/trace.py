"""Buffered per-frame trace writer backed by Parquet."""

from __future__ import annotations

from fractions import Fraction
from pathlib import Path
from types import TracebackType

import pyarrow as pa
import pyarrow.parquet as pq

from snake_replay.config.constants import FLUSH_THRESHOLD
from snake_replay.domain.state import SimulationState
from snake_replay.io.schemas import TRACE_COLUMNS, TRACE_SCHEMA


def flush_trace_columns(
    columns: dict[str, list[object]],
    path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated rows to Parquet and clear the in-memory buffers."""
    if not columns["frame"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=TRACE_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(path, TRACE_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


class TraceWriter:
    """Collects one row per snake per frame and streams them to ``path``.

    Use as a context manager so the Parquet footer is always written::

        with TraceWriter(path) as trace:
            trace.record(handler.state, handler.total_duration)
    """

    def __init__(self, path: Path, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._flush_threshold = flush_threshold
        self._writer: pq.ParquetWriter | None = None
        self._columns: dict[str, list[object]] = {name: [] for name in TRACE_COLUMNS}
        self._frame = 0
        self._closed = False
        self.rows_written = 0

    def record(self, state: SimulationState, time_ms: Fraction | float) -> None:
        apple = state.apple
        for snake_idx, snake in enumerate(state.snakes):
            row = {
                "frame": self._frame,
                "time_ms": float(time_ms),
                "snake_idx": snake_idx,
                "x": snake.position.x,
                "y": snake.position.y,
                "length": snake.length,
                "target_length": snake.target_length,
                "score": snake.score,
                "speed": state.speed,
                "apple_x": apple.position.x if apple is not None else None,
                "apple_y": apple.position.y if apple is not None else None,
                "apple_type": apple.type.value if apple is not None else None,
                "game_over": state.game_over,
            }
            for name, value in row.items():
                self._columns[name].append(value)
        self._frame += 1
        self.rows_written += len(state.snakes)
        if len(self._columns["frame"]) >= self._flush_threshold:
            self._writer = flush_trace_columns(self._columns, self.path, self._writer)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._writer = flush_trace_columns(self._columns, self.path, self._writer)
        if self._writer is None:
            # Nothing recorded; still leave a readable, empty file behind.
            pq.write_table(TRACE_SCHEMA.empty_table(), self.path)
            return
        self._writer.close()
        self._writer = None

    def __enter__(self) -> TraceWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
