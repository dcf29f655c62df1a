from __future__ import annotations

import numpy as np
import pytest

from snake_replay.config.stages import open_stage
from snake_replay.domain.state import Apple, AppleType
from snake_replay.domain.vector import Vector
from snake_replay.metrics import (
    APPLE_CELL,
    BLOCK_CELL,
    EMPTY_CELL,
    SNAKE_CELL_BASE,
    exploration_coverage,
    occupancy_grid,
)
from snake_replay.simulation.engine import SimulationEngine


def _engine() -> SimulationEngine:
    return SimulationEngine(open_stage(5, 4, seed=0, start=Vector(1, 1)))


def test_grid_marks_blocks_apple_and_snake() -> None:
    engine = _engine()
    engine.state.apple = Apple(position=Vector(3, 2), type=AppleType.DIET)
    engine.state.snakes[0].tiles = [Vector(1, 1), Vector(2, 1)]

    grid = occupancy_grid(engine.state, 5, 4)

    assert grid.shape == (4, 5)
    assert grid.dtype == np.int64
    assert grid[0, 0] == BLOCK_CELL
    assert grid[3, 4] == BLOCK_CELL
    assert grid[2, 3] == APPLE_CELL
    assert grid[1, 1] == grid[1, 2] == SNAKE_CELL_BASE
    assert grid[2, 1] == EMPTY_CELL
    assert int(np.count_nonzero(grid == BLOCK_CELL)) == 14


def test_coverage_over_open_cells() -> None:
    engine = _engine()
    open_cells = [Vector(x, y) for x in range(1, 4) for y in range(1, 3)]
    assert exploration_coverage(open_cells, engine.state, 5, 4) == pytest.approx(1.0)
    assert exploration_coverage(open_cells[:3], engine.state, 5, 4) == pytest.approx(0.5)
    assert exploration_coverage([], engine.state, 5, 4) == 0.0
