"""Simulation engine and per-step rules.

The headless runner lives in ``snake_replay.simulation.headless``; it builds
on the replay drivers and is imported from there directly.
"""

from snake_replay.simulation.engine import SimulationEngine, exact_duration

__all__ = [
    "SimulationEngine",
    "exact_duration",
]
