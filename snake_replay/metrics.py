"""Grid views and coverage statistics over a ``SimulationState``."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from snake_replay.domain.state import SimulationState
from snake_replay.domain.vector import Vector

EMPTY_CELL = 0
BLOCK_CELL = 1
APPLE_CELL = 2
SNAKE_CELL_BASE = 3
"""Snake ``i`` occupies cells marked ``SNAKE_CELL_BASE + i``."""


def occupancy_grid(state: SimulationState, x_tiles: int, y_tiles: int) -> np.ndarray:
    """Return an int array of shape ``(y_tiles, x_tiles)`` indexed ``[y, x]``.

    Snake tiles are drawn last so a snake standing on a spot always shows.
    """
    grid = np.full((y_tiles, x_tiles), EMPTY_CELL, dtype=np.int64)
    for block in state.blocks:
        grid[block.y, block.x] = BLOCK_CELL
    if state.apple is not None:
        grid[state.apple.position.y, state.apple.position.x] = APPLE_CELL
    for snake_idx, snake in enumerate(state.snakes):
        for tile in snake.tiles:
            grid[tile.y, tile.x] = SNAKE_CELL_BASE + snake_idx
    return grid


def exploration_coverage(
    visited: Iterable[Vector], state: SimulationState, x_tiles: int, y_tiles: int
) -> float:
    """Fraction of non-block cells that appear in ``visited``."""
    mask = np.zeros((y_tiles, x_tiles), dtype=bool)
    for cell in visited:
        mask[cell.y, cell.x] = True
    open_cells = occupancy_grid(state, x_tiles, y_tiles) != BLOCK_CELL
    total = int(np.count_nonzero(open_cells))
    if total == 0:
        return 0.0
    return float(np.count_nonzero(mask & open_cells)) / total
