"""Colony world: ants, pheromone grid and foraging statistics."""

from __future__ import annotations

import math
import random
from collections import deque
from dataclasses import asdict, dataclass
from typing import Any, Sequence

from core.vector import distance
from simulations.ant_colony.agents import Ant
from simulations.ant_colony.behavior import DELIVERED, ColonySettings, update_ant
from simulations.ant_colony.grid import FOOD, HOME, ColonyGrid


@dataclass(frozen=True)
class ColonyStats:
    food_collected: int
    active_ants: int
    average_path_length: float
    total_pheromone_intensity: float


def colony_stats(ants: Sequence[Ant], grid: ColonyGrid, active_radius: float = 2.0) -> ColonyStats:
    """Carrying ants, ants away from the nest, mean recent path length and total pheromone."""
    nest = grid.nest_center
    paths = [ant.path_length() for ant in ants if len(ant.path) > 1]
    return ColonyStats(
        food_collected=sum(1 for ant in ants if ant.has_food),
        active_ants=sum(1 for ant in ants if distance(ant.position, nest) > active_radius),
        average_path_length=sum(paths) / len(paths) if paths else 0.0,
        total_pheromone_intensity=grid.total_pheromone(),
    )


def evaluate_path_efficiency(stats: ColonyStats) -> tuple[float, list[str]]:
    """Score foraging efficiency in [0, 1] with at most two tuning hints."""
    efficiency = 0.0
    suggestions: list[str] = []

    if stats.food_collected > 0:
        efficiency += 0.3

    if stats.average_path_length < 30:
        efficiency += 0.4
    elif stats.average_path_length < 50:
        efficiency += 0.2
        suggestions.append("Paths are somewhat long. Consider increasing pheromone strength.")
    else:
        suggestions.append("Paths are very long. Try adjusting ant parameters to optimize routes.")

    if stats.total_pheromone_intensity > 50:
        efficiency += 0.3
    else:
        suggestions.append("Weak pheromone trails. Consider reducing evaporation rate.")

    if stats.active_ants < stats.food_collected * 2:
        suggestions.append("Many ants are idle. Try increasing the number of active foragers.")

    return efficiency, suggestions[:2]


def suggest_parameters(stats: ColonyStats) -> dict[str, float]:
    suggestions: dict[str, float] = {}
    if stats.average_path_length > 40 and stats.total_pheromone_intensity < 30:
        suggestions["pheromone_strength"] = 1.5
    elif stats.average_path_length < 20 and stats.total_pheromone_intensity > 100:
        suggestions["pheromone_strength"] = 0.8

    if stats.total_pheromone_intensity > 150:
        suggestions["evaporation_rate"] = 0.05
    elif stats.total_pheromone_intensity < 20:
        suggestions["evaporation_rate"] = 0.01

    if stats.active_ants < stats.food_collected:
        suggestions["ant_speed"] = 1.5
    return suggestions


class ColonyEnvironment:
    """Fixed-size colony with a central nest; ants are never added or removed."""

    def __init__(self, settings: ColonySettings, rng: random.Random, size: int = 100) -> None:
        self.settings = settings
        self.rng = rng
        self.size = int(size)
        self.step_count = 0
        self.food_delivered = 0
        self.ants: list[Ant] = []
        self.grid = self._new_grid()

    def _new_grid(self) -> ColonyGrid:
        return ColonyGrid(
            size=self.size,
            pheromone_cap=self.settings.pheromone_cap,
            home_multiplier=self.settings.home_multiplier,
            deposit_ramp=self.settings.deposit_ramp,
        )

    def reset(self) -> None:
        """Fresh grid with every ant on the nest facing a random direction."""
        self.step_count = 0
        self.food_delivered = 0
        self.grid = self._new_grid()
        nest = self.grid.nest_center
        self.ants = []
        for index in range(max(0, self.settings.number_of_ants)):
            ant = Ant(
                ant_id=index,
                x=nest.x,
                y=nest.y,
                direction=self.rng.uniform(0.0, 2.0 * math.pi),
                path=deque(maxlen=20),
            )
            ant.record_position(self.settings.path_step)
            self.ants.append(ant)

    def step(self) -> None:
        """Move every ant, lay pheromone where it lands, then evaporate the field."""
        for ant in self.ants:
            if update_ant(ant, self.grid, self.settings, self.rng) == DELIVERED:
                self.food_delivered += 1
            kind = HOME if ant.has_food else FOOD
            self.grid.deposit(ant.x, ant.y, kind, self.settings.pheromone_strength)
        self.grid.evaporate(self.settings.evaporation_rate)
        self.step_count += 1

    def place_food(self, x: int, y: int) -> bool:
        return self.grid.place_food(x, y, self.settings.food_amount)

    def toggle_obstacle(self, x: int, y: int) -> bool:
        return self.grid.toggle_obstacle(x, y)

    def place_obstacle(self, x: int, y: int) -> bool:
        return self.grid.place_obstacle(x, y)

    def clear(self) -> None:
        self.grid.clear()

    def stats(self) -> ColonyStats:
        return colony_stats(self.ants, self.grid)

    def get_metrics(self) -> dict[str, float]:
        stats = self.stats()
        efficiency, _ = evaluate_path_efficiency(stats)
        payload = {key: float(value) for key, value in asdict(stats).items()}
        payload["food_delivered"] = float(self.food_delivered)
        payload["path_efficiency"] = float(efficiency)
        return payload

    def get_render_state(self) -> dict[str, Any]:
        nest_x, nest_y = self.grid.nest
        return {
            "simulation": "ant_colony",
            "step": int(self.step_count),
            "size": self.size,
            "nest": [nest_x, nest_y],
            "food": self.grid.food_cells(),
            "obstacles": self.grid.obstacle_cells(),
            "home_pheromone": self.grid.pheromone_cells(HOME),
            "food_pheromone": self.grid.pheromone_cells(FOOD),
            "ants": [ant.to_dict() for ant in self.ants],
        }
