"""Simulation plugin for game_of_life."""

from __future__ import annotations

import random
from typing import Any, Sequence

from simulations.base_simulation import Simulation
from simulations.game_of_life import engine
from simulations.game_of_life.patterns import PATTERNS


class GameOfLifeSimulation(Simulation):
    """Conway's Game of Life on a fixed, non-wrapping grid."""

    def __init__(self, params: dict[str, Any], rng: random.Random) -> None:
        super().__init__(params=params, rng=rng)
        self.rows = int(params.get("rows", 100))
        self.cols = int(params.get("cols", 100))
        self.initial_state = str(params.get("initial_state", "random"))
        self.random_density = float(params.get("random_density", 0.3))
        self.random_region = int(params.get("random_region", 40))
        self.generation = 0
        self.grid = engine.create_empty_grid(self.rows, self.cols)
        self.previous_grid = self.grid.copy()

    def reset(self) -> None:
        if self.initial_state == "empty":
            self.clear()
        elif self.initial_state == "random":
            self.randomize()
        else:
            self.load_scenario(self.initial_state)

    def step(self) -> None:
        self.previous_grid = self.grid
        self.grid = engine.step(self.grid)
        self.generation += 1

    def clear(self) -> None:
        self._replace_grid(engine.create_empty_grid(self.rows, self.cols))

    def randomize(self) -> None:
        self._replace_grid(
            engine.random_grid(
                self.rows,
                self.cols,
                self.rng,
                density=self.random_density,
                region=self.random_region,
            )
        )

    def load_scenario(self, name: str) -> None:
        self._replace_grid(engine.load_scenario(name, self.rows, self.cols))

    def toggle_cell(self, row: int, col: int) -> None:
        self.grid = engine.toggle_cell(self.grid, row, col)

    def place_pattern(self, pattern: str | Sequence[Sequence[int]], row: int, col: int) -> None:
        cells = PATTERNS[pattern].cells if isinstance(pattern, str) else pattern
        self.grid = engine.place_pattern(self.grid, cells, row, col)

    def changed_cells(self) -> list[tuple[int, int]]:
        """Cells whose state differs from the previous generation."""
        rows, cols = (self.grid != self.previous_grid).nonzero()
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def get_metrics(self) -> dict[str, float]:
        return {
            "generation": float(self.generation),
            "live_cells": float(engine.count_live_cells(self.grid)),
            "changed_cells": float(len(self.changed_cells())),
        }

    def get_render_state(self) -> dict[str, Any]:
        return {
            "simulation": SIMULATION_NAME,
            "step": int(self.generation),
            "rows": self.rows,
            "cols": self.cols,
            "cells": self.grid.astype(int).tolist(),
        }

    def _replace_grid(self, grid: engine.Grid) -> None:
        self.grid = grid
        self.previous_grid = grid.copy()
        self.generation = 0


SIMULATION_NAME = "game_of_life"
SimulationClass = GameOfLifeSimulation
