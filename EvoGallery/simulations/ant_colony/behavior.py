"""Per-ant sensing, steering, movement and target rules."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import ClassVar

from core.schema_validator import clamp_fields
from core.vector import Vector, distance, from_angle, wrap_angle
from simulations.ant_colony.agents import Ant
from simulations.ant_colony.grid import FOOD, HOME, ColonyGrid

DELIVERED = "delivered"
PICKED_UP = "picked_up"


@dataclass(frozen=True)
class ColonySettings:
    """Runtime parameters for the ant colony engine."""

    number_of_ants: int = 50
    pheromone_strength: float = 1.0
    evaporation_rate: float = 0.005
    ant_speed: float = 1.0
    sensor_distance: float = 20.0
    sensor_angle: float = math.pi / 4
    sensor_samples: int = 4
    food_amount: int = 100
    pheromone_cap: float = 2.0
    home_multiplier: float = 1.5
    deposit_ramp: float = 20.0
    home_bias: float = 0.5
    strong_trail: float = 0.2
    commit_trail: float = 0.5
    obstacle_turn: float = math.pi / 2
    path_step: float = 1.0

    BOUNDS: ClassVar[dict[str, tuple[float, float]]] = {
        "number_of_ants": (0, 1000),
        "pheromone_strength": (0.1, 2.0),
        "evaporation_rate": (0.001, 0.1),
        "ant_speed": (0.5, 2.0),
        "sensor_distance": (10.0, 50.0),
        "sensor_angle": (math.pi / 12, math.pi / 2),
        "sensor_samples": (1, 16),
        "food_amount": (1, 10000),
        "pheromone_cap": (0.5, 10.0),
        "home_multiplier": (0.1, 5.0),
        "deposit_ramp": (1.0, 100.0),
        "home_bias": (0.0, 2.0),
        "strong_trail": (0.0, 10.0),
        "commit_trail": (0.0, 10.0),
        "obstacle_turn": (0.0, math.pi),
        "path_step": (0.1, 10.0),
    }

    def __post_init__(self) -> None:
        clamp_fields(self, self.BOUNDS)


@dataclass(frozen=True)
class SensorReading:
    angle: float
    pheromone: float
    obstacle: bool


def sense(ant: Ant, grid: ColonyGrid, settings: ColonySettings) -> tuple[SensorReading, ...]:
    """Read the left, centre and right sensors.

    Each sensor samples evenly along its ray up to ``sensor_distance``. The
    reading is the mean of the samples weighted by ``1 / (1 + d / D) ** 2``; the
    weights are normalised, so a uniform trail reads its raw concentration and
    ``strong_trail``/``commit_trail`` compare against unscaled values. Any
    blocked sample flags an obstacle. Ants carrying food read home
    pheromone (ignored close to the nest), others read food pheromone.
    """
    kind = HOME if ant.has_food else FOOD
    near_nest = distance(ant.position, grid.nest_center) < settings.sensor_distance * 0.5
    samples = max(1, settings.sensor_samples)
    readings = []
    for offset in (-settings.sensor_angle, 0.0, settings.sensor_angle):
        heading = ant.direction + offset
        obstacle = False
        weighted = 0.0
        total_weight = 0.0
        for index in range(1, samples + 1):
            reach = settings.sensor_distance * index / samples
            point = ant.position + from_angle(heading, reach)
            if grid.is_blocked(point.x, point.y):
                obstacle = True
                continue
            weight = 1.0 / (1.0 + reach / settings.sensor_distance) ** 2
            value = 0.0 if (kind == HOME and near_nest) else grid.pheromone_at(point.x, point.y, kind)
            weighted += weight * value
            total_weight += weight
        pheromone = weighted / total_weight if total_weight > 0.0 else 0.0
        readings.append(SensorReading(angle=offset, pheromone=pheromone, obstacle=obstacle))
    return tuple(readings)


def steer(
    ant: Ant,
    readings: tuple[SensorReading, ...],
    grid: ColonyGrid,
    settings: ColonySettings,
    rng: random.Random,
) -> float:
    """Return the new heading in ``[-pi, pi)``."""
    strongest = max((reading.pheromone for reading in readings), default=0.0)
    scale = strongest if strongest > 0.0 else 1.0
    trail = sum(
        reading.angle * (reading.pheromone / scale) * settings.pheromone_strength
        for reading in readings
    )

    damping = 0.1 if strongest > settings.commit_trail or ant.has_food else 1.0
    randomness = (rng.random() - 0.5) * math.pi * 0.5 * damping

    direction = ant.direction
    if ant.has_food:
        nest = grid.nest_center
        bearing = math.atan2(nest.y - ant.y, nest.x - ant.x)
        homeward = wrap_angle(bearing - ant.direction) * settings.home_bias
        direction += homeward * 0.5 + trail * 0.3 + randomness * 0.2
    elif strongest > settings.strong_trail:
        direction += trail * 0.6 + randomness * 0.4
    else:
        direction += trail * 0.3 + randomness * 0.7

    left, centre, right = readings[0].obstacle, readings[1].obstacle, readings[-1].obstacle
    if centre or (left and right):
        direction += math.pi
    elif left:
        direction += settings.obstacle_turn
    elif right:
        direction -= settings.obstacle_turn
    return wrap_angle(direction)


def move(ant: Ant, direction: float, grid: ColonyGrid, settings: ColonySettings) -> Vector:
    """Destination one ``ant_speed`` step along ``direction``; blocked moves stay put."""
    target = ant.position + from_angle(direction, settings.ant_speed)
    if grid.is_blocked(target.x, target.y):
        return ant.position
    return target


def check_target(has_food: bool, position: Vector, grid: ColonyGrid) -> bool:
    """True when an ant arriving at ``position`` should flip ``has_food``."""
    col, row = grid.cell_of(position.x, position.y)
    if not grid.in_bounds(col, row):
        return False
    if has_food:
        return grid.is_nest(col, row)
    return grid.has_food(col, row)


def update_ant(ant: Ant, grid: ColonyGrid, settings: ColonySettings, rng: random.Random) -> str | None:
    """Run one tick for ``ant`` in place and return the pickup/delivery event, if any."""
    readings = sense(ant, grid, settings)
    ant.direction = steer(ant, readings, grid, settings, rng)
    destination = move(ant, ant.direction, grid, settings)
    ant.x, ant.y = destination.x, destination.y
    ant.record_position(settings.path_step)

    if not check_target(ant.has_food, destination, grid):
        return None
    if ant.has_food:
        ant.has_food = False
        return DELIVERED
    col, row = grid.cell_of(destination.x, destination.y)
    grid.take_food(col, row)
    ant.has_food = True
    return PICKED_UP
