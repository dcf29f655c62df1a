"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def session_path(out_dir: Path) -> Path:
    """Return path to the recorded session JSON file."""
    return out_dir / "session.json"


def trace_path(out_dir: Path) -> Path:
    """Return path to the per-frame trace Parquet file."""
    return logs_dir(out_dir) / "trace.parquet"


def summary_path(out_dir: Path) -> Path:
    """Return path to the run summary JSON file."""
    return logs_dir(out_dir) / "summary.json"
