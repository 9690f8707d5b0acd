"""Pure Game of Life rules over boolean numpy grids.

Every function returns a new grid; inputs are never mutated so callers can
diff consecutive generations.
"""

from __future__ import annotations

import random
from typing import Sequence

import numpy as np

from simulations.game_of_life.patterns import PATTERNS, SCENARIOS

Grid = np.ndarray


def create_empty_grid(rows: int, cols: int) -> Grid:
    return np.zeros((int(rows), int(cols)), dtype=bool)


def count_neighbors(grid: Grid) -> np.ndarray:
    """Live Moore-neighbour count per cell; cells beyond the edge count as dead."""
    padded = np.pad(grid.astype(np.uint8), 1, mode="constant", constant_values=0)
    rows, cols = grid.shape
    counts = np.zeros((rows, cols), dtype=np.uint8)
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            counts += padded[1 + dr : 1 + dr + rows, 1 + dc : 1 + dc + cols]
    return counts


def step(grid: Grid) -> Grid:
    """Advance one synchronous generation (B3/S23, no wraparound)."""
    neighbors = count_neighbors(grid)
    survives = grid & ((neighbors == 2) | (neighbors == 3))
    born = ~grid & (neighbors == 3)
    return survives | born


def toggle_cell(grid: Grid, row: int, col: int) -> Grid:
    """Flip one cell; coordinates outside the grid leave it unchanged."""
    new_grid = grid.copy()
    rows, cols = grid.shape
    if 0 <= row < rows and 0 <= col < cols:
        new_grid[row, col] = not new_grid[row, col]
    return new_grid


def place_pattern(grid: Grid, pattern: Sequence[Sequence[int]], row: int, col: int) -> Grid:
    """Stamp a 0/1 sub-matrix with its top-left at ``(row, col)``.

    Zero entries overwrite with dead cells. Parts falling outside the grid are
    clipped.
    """
    new_grid = grid.copy()
    rows, cols = grid.shape
    for i, pattern_row in enumerate(pattern):
        target_row = row + i
        if not 0 <= target_row < rows:
            continue
        for j, cell in enumerate(pattern_row):
            target_col = col + j
            if 0 <= target_col < cols:
                new_grid[target_row, target_col] = cell == 1
    return new_grid


def count_live_cells(grid: Grid) -> int:
    return int(np.count_nonzero(grid))


def random_grid(
    rows: int,
    cols: int,
    rng: random.Random,
    density: float = 0.3,
    region: int = 40,
) -> Grid:
    """Fill a centred ``region`` x ``region`` square with live cells at ``density``."""
    grid = create_empty_grid(rows, cols)
    region_rows = min(region, rows)
    region_cols = min(region, cols)
    start_row = (rows - region_rows) // 2
    start_col = (cols - region_cols) // 2
    for i in range(region_rows):
        for j in range(region_cols):
            grid[start_row + i, start_col + j] = rng.random() < density
    return grid


def grids_equal(a: Grid, b: Grid) -> bool:
    return a.shape == b.shape and bool(np.array_equal(a, b))


def load_scenario(name: str, rows: int, cols: int) -> Grid:
    """Return a fresh grid with every pattern of scenario ``name`` stamped in."""
    scenario = SCENARIOS.get(name)
    if scenario is None:
        available = ", ".join(sorted(SCENARIOS))
        raise KeyError(f"Unknown scenario '{name}'. Available scenarios: {available}")
    grid = create_empty_grid(rows, cols)
    for pattern_key, row, col in scenario.placements:
        grid = place_pattern(grid, PATTERNS[pattern_key].cells, row, col)
    return grid
