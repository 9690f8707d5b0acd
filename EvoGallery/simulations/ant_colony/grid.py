"""Pheromone field, obstacles, food and the nest of an ant colony."""

from __future__ import annotations

import math

import numpy as np

from core.schema_validator import clamp_value
from core.vector import Vector, distance

HOME = "home"
FOOD = "food"

GRID_BOUNDS = {
    "size": (10, 500),
    "pheromone_cap": (0.5, 10.0),
    "home_multiplier": (0.1, 5.0),
    "deposit_ramp": (1.0, 100.0),
}


class ColonyGrid:
    """Square grid of cells with two pheromone channels.

    Coordinates are ``(x, y)`` floats; a point belongs to the cell
    ``(floor(x), floor(y))``. Anything outside the grid counts as blocked.
    """

    def __init__(
        self,
        size: int = 100,
        pheromone_cap: float = 2.0,
        home_multiplier: float = 1.5,
        deposit_ramp: float = 20.0,
    ) -> None:
        self.size = clamp_value("size", int(size), GRID_BOUNDS["size"])
        self.pheromone_cap = clamp_value("pheromone_cap", float(pheromone_cap), GRID_BOUNDS["pheromone_cap"])
        self.home_multiplier = clamp_value("home_multiplier", float(home_multiplier), GRID_BOUNDS["home_multiplier"])
        self.deposit_ramp = clamp_value("deposit_ramp", float(deposit_ramp), GRID_BOUNDS["deposit_ramp"])
        self.nest = (self.size // 2, self.size // 2)
        shape = (self.size, self.size)
        self.home_pheromone = np.zeros(shape, dtype=float)
        self.food_pheromone = np.zeros(shape, dtype=float)
        self.obstacle = np.zeros(shape, dtype=bool)
        self.food = np.zeros(shape, dtype=int)

    @property
    def nest_center(self) -> Vector:
        return Vector(self.nest[0] + 0.5, self.nest[1] + 0.5)

    def cell_of(self, x: float, y: float) -> tuple[int, int]:
        return int(math.floor(x)), int(math.floor(y))

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.size and 0 <= row < self.size

    def is_nest(self, col: int, row: int) -> bool:
        return (col, row) == self.nest

    def is_blocked(self, x: float, y: float) -> bool:
        col, row = self.cell_of(x, y)
        if not self.in_bounds(col, row):
            return True
        return bool(self.obstacle[row, col])

    def has_food(self, col: int, row: int) -> bool:
        return self.in_bounds(col, row) and self.food[row, col] > 0

    def pheromone_at(self, x: float, y: float, kind: str) -> float:
        col, row = self.cell_of(x, y)
        if not self.in_bounds(col, row):
            return 0.0
        field = self.home_pheromone if kind == HOME else self.food_pheromone
        return float(field[row, col])

    def place_food(self, col: int, row: int, amount: int) -> bool:
        """Put ``amount`` food units on a cell; the nest and obstacles refuse food."""
        if not self.in_bounds(col, row) or self.is_nest(col, row) or self.obstacle[row, col]:
            return False
        self.food[row, col] = max(1, int(amount))
        return True

    def _clear_cell(self, col: int, row: int) -> None:
        self.food[row, col] = 0
        self.home_pheromone[row, col] = 0.0
        self.food_pheromone[row, col] = 0.0

    def place_obstacle(self, col: int, row: int) -> bool:
        if not self.in_bounds(col, row) or self.is_nest(col, row):
            return False
        self.obstacle[row, col] = True
        self._clear_cell(col, row)
        return True

    def toggle_obstacle(self, col: int, row: int) -> bool:
        """Flip a cell's obstacle flag and return the new flag."""
        if not self.in_bounds(col, row) or self.is_nest(col, row):
            return False
        if self.obstacle[row, col]:
            self.obstacle[row, col] = False
            return False
        return self.place_obstacle(col, row)

    def clear(self) -> None:
        """Remove all obstacles, food and pheromone; the nest stays."""
        self.home_pheromone.fill(0.0)
        self.food_pheromone.fill(0.0)
        self.obstacle.fill(False)
        self.food.fill(0)

    def take_food(self, col: int, row: int) -> bool:
        """Remove one food unit; the cell stops being food once it runs out."""
        if not self.has_food(col, row):
            return False
        self.food[row, col] -= 1
        return True

    def deposit(self, x: float, y: float, kind: str, amount: float) -> None:
        """Add pheromone at a point, ramping up with distance from the nest."""
        col, row = self.cell_of(x, y)
        if not self.in_bounds(col, row) or self.obstacle[row, col]:
            return
        ramp = min(1.0, distance(Vector(x, y), self.nest_center) / self.deposit_ramp)
        if kind == HOME:
            field = self.home_pheromone
            ramp *= self.home_multiplier
        else:
            field = self.food_pheromone
        field[row, col] = min(self.pheromone_cap, max(0.0, field[row, col] + amount * ramp))

    def evaporate(self, rate: float) -> None:
        """Decay both fields by ``rate`` (clamped to [0, 1]), keeping them in ``[0, cap]``."""
        keep = 1.0 - max(0.0, min(1.0, float(rate)))
        for field in (self.home_pheromone, self.food_pheromone):
            np.multiply(field, keep, out=field)
            np.clip(field, 0.0, self.pheromone_cap, out=field)

    def total_pheromone(self) -> float:
        return float(self.home_pheromone.sum() + self.food_pheromone.sum())

    def food_cells(self) -> list[dict[str, int]]:
        rows, cols = np.nonzero(self.food)
        return [
            {"x": int(col), "y": int(row), "amount": int(self.food[row, col])}
            for row, col in zip(rows, cols)
        ]

    def obstacle_cells(self) -> list[list[int]]:
        rows, cols = np.nonzero(self.obstacle)
        return [[int(col), int(row)] for row, col in zip(rows, cols)]

    def pheromone_cells(self, kind: str, threshold: float = 0.01) -> list[list[float]]:
        """Sparse ``[x, y, value]`` listing of cells above ``threshold``."""
        field = self.home_pheromone if kind == HOME else self.food_pheromone
        rows, cols = np.nonzero(field > threshold)
        return [[int(col), int(row), float(field[row, col])] for row, col in zip(rows, cols)]
