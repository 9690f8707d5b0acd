"""Simulation plugin for ant_colony."""

from __future__ import annotations

import random
from typing import Any

from simulations.ant_colony.behavior import ColonySettings
from simulations.ant_colony.environment import ColonyEnvironment
from simulations.base_simulation import Simulation


def _cells(raw: Any, name: str) -> list[tuple[int, int]]:
    cells = []
    for item in raw or []:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ValueError(f"Parameter '{name}' expects [x, y] pairs, got {item!r}.")
        cells.append((int(item[0]), int(item[1])))
    return cells


class AntColonySimulation(Simulation):
    """Pheromone foraging around a central nest."""

    def __init__(self, params: dict[str, Any], rng: random.Random) -> None:
        super().__init__(params=params, rng=rng)
        self.settings = ColonySettings(
            number_of_ants=int(params.get("number_of_ants", 50)),
            pheromone_strength=float(params.get("pheromone_strength", 1.0)),
            evaporation_rate=float(params.get("evaporation_rate", 0.005)),
            ant_speed=float(params.get("ant_speed", 1.0)),
            sensor_distance=float(params.get("sensor_distance", 20.0)),
            sensor_angle=float(params.get("sensor_angle", ColonySettings.sensor_angle)),
            sensor_samples=int(params.get("sensor_samples", 4)),
            food_amount=int(params.get("food_amount", 100)),
            pheromone_cap=float(params.get("pheromone_cap", 2.0)),
            home_multiplier=float(params.get("home_multiplier", 1.5)),
            deposit_ramp=float(params.get("deposit_ramp", 20.0)),
            home_bias=float(params.get("home_bias", 0.5)),
            strong_trail=float(params.get("strong_trail", 0.2)),
            commit_trail=float(params.get("commit_trail", 0.5)),
            obstacle_turn=float(params.get("obstacle_turn", ColonySettings.obstacle_turn)),
            path_step=float(params.get("path_step", 1.0)),
        )
        self.initial_food = _cells(params.get("food"), "food")
        self.initial_obstacles = _cells(params.get("obstacles"), "obstacles")
        self.environment = ColonyEnvironment(
            settings=self.settings,
            rng=rng,
            size=int(params.get("grid_size", 100)),
        )

    def reset(self) -> None:
        self.environment.reset()
        for x, y in self.initial_obstacles:
            self.environment.place_obstacle(x, y)
        for x, y in self.initial_food:
            self.environment.place_food(x, y)

    def step(self) -> None:
        self.environment.step()

    def place_food(self, x: int, y: int) -> bool:
        return self.environment.place_food(x, y)

    def toggle_obstacle(self, x: int, y: int) -> bool:
        return self.environment.toggle_obstacle(x, y)

    def clear(self) -> None:
        self.environment.clear()

    def get_metrics(self) -> dict[str, float]:
        return self.environment.get_metrics()

    def get_render_state(self) -> dict[str, Any]:
        return self.environment.get_render_state()


SIMULATION_NAME = "ant_colony"
SimulationClass = AntColonySimulation
