"""CLI entrypoint for replaying, verifying and recording sessions.

Subcommands:

- ``replay``: play a session file back frame by frame and summarise it
- ``verify``: rebuild a session through both drivers and compare states
- ``simulate``: run the default arena headless and write its artifacts
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from snake_replay.config.constants import DEFAULT_FRAME_MS, HEADLESS_MAX_STEPS, HEADLESS_TIME_STEP_MS
from snake_replay.config.stages import default_stage
from snake_replay.config.types import HeadlessConfig
from snake_replay.domain.state import SimulationState
from snake_replay.io.paths import session_path, summary_path, trace_path
from snake_replay.io.session_file import load_session, save_session
from snake_replay.io.trace import TraceWriter
from snake_replay.replay.handlers import LiveHandler, PlaybackHandler
from snake_replay.simulation.headless import run_headless

logger = logging.getLogger(__name__)


def _state_summary(state: SimulationState) -> dict[str, object]:
    return {
        "game_over": state.game_over,
        "speed": state.speed,
        "apple": (
            None
            if state.apple is None
            else {"position": state.apple.position.to_list(), "type": state.apple.type.value}
        ),
        "snakes": [
            {
                "head": snake.position.to_list(),
                "length": snake.length,
                "target_length": snake.target_length,
                "score": snake.score,
            }
            for snake in state.snakes
        ],
    }


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from exc
    if not value > 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return value


def run_replay(session_file: Path, frame_ms: float, trace_out: Path | None) -> dict[str, object]:
    """Play a session back at a fixed frame interval until the log is exhausted."""
    session = load_session(session_file)
    handler = PlaybackHandler(session.stage, session.inputs)
    frames = 0
    trace = TraceWriter(trace_out) if trace_out is not None else None
    try:
        if trace is not None:
            trace.record(handler.state, handler.total_duration)
        while not handler.is_done:
            handler.advance_time(frame_ms)
            frames += 1
            if trace is not None:
                trace.record(handler.state, handler.total_duration)
    finally:
        if trace is not None:
            trace.close()
    return {
        "frames": frames,
        "time_ms": float(handler.total_duration),
        "inputs": len(session.inputs),
        "state": _state_summary(handler.state),
    }


def run_verify(session_file: Path) -> dict[str, object]:
    """Rebuild the final state through a live fast-forward and a playback."""
    session = load_session(session_file)
    live = LiveHandler(session.stage, session.inputs)
    playback = PlaybackHandler(session.stage, session.inputs)
    playback.advance_time(live.total_duration)
    return {
        "match": live.state == playback.state and live.total_duration == playback.total_duration,
        "inputs": len(session.inputs),
        "time_ms": float(live.total_duration),
    }


def run_simulate(
    seed: int | None, max_steps: int, time_step_ms: float, out_dir: Path
) -> dict[str, object]:
    """Run the default arena with no actors and persist session, trace and summary."""
    stage = default_stage(seed)
    config = HeadlessConfig(time_step_ms=time_step_ms, max_steps=max_steps)
    with TraceWriter(trace_path(out_dir)) as trace:
        result = run_headless(stage, config=config, trace=trace)
    save_session(session_path(out_dir), stage, result.inputs)
    summary = result.to_summary()
    summary_path(out_dir).write_text(json.dumps(summary, ensure_ascii=False, indent=2))
    return summary


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snake_replay", description="Deterministic snake record/replay tools"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    replay_parser = subparsers.add_parser("replay", help="Play back a recorded session")
    replay_parser.add_argument("session", type=Path)
    replay_parser.add_argument("--frame-ms", type=_positive_float, default=DEFAULT_FRAME_MS)
    replay_parser.add_argument("--trace-out", type=Path, default=None)

    verify_parser = subparsers.add_parser("verify", help="Check live and playback agree")
    verify_parser.add_argument("session", type=Path)

    simulate_parser = subparsers.add_parser("simulate", help="Run the default arena headless")
    simulate_parser.add_argument("--seed", type=int, default=None)
    simulate_parser.add_argument("--max-steps", type=int, default=HEADLESS_MAX_STEPS)
    simulate_parser.add_argument(
        "--time-step", type=_positive_float, default=float(HEADLESS_TIME_STEP_MS)
    )
    simulate_parser.add_argument("--out-dir", type=Path, default=Path("data/simulate"))

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "replay":
            summary = run_replay(args.session, args.frame_ms, args.trace_out)
        elif args.command == "verify":
            summary = run_verify(args.session)
        else:
            summary = run_simulate(args.seed, args.max_steps, args.time_step, args.out_dir)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    print(json.dumps(summary, ensure_ascii=False, indent=2))
    if args.command == "verify" and not summary["match"]:
        logger.warning("live and playback states diverged")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
