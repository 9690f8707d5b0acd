"""Config schema for ant_colony simulation plugin."""

import math

from simulations.ant_colony.behavior import ColonySettings
from simulations.ant_colony.grid import GRID_BOUNDS

REQUIRED_PARAMS: dict = {}

DEFAULTS = {
    "grid_size": 100,
    "number_of_ants": 50,
    "pheromone_strength": 1.0,
    "evaporation_rate": 0.005,
    "ant_speed": 1.0,
    "sensor_distance": 20.0,
    "sensor_angle": math.pi / 4,
    "sensor_samples": 4,
    "food_amount": 100,
    "pheromone_cap": 2.0,
    "home_multiplier": 1.5,
    "deposit_ramp": 20.0,
    "home_bias": 0.5,
    "strong_trail": 0.2,
    "commit_trail": 0.5,
    "obstacle_turn": math.pi / 2,
    "path_step": 1.0,
    "food": [],
    "obstacles": [],
}

OPTIONAL_PARAMS = {
    "grid_size": int,
    "number_of_ants": int,
    "pheromone_strength": float,
    "evaporation_rate": float,
    "ant_speed": float,
    "sensor_distance": float,
    "sensor_angle": float,
    "sensor_samples": int,
    "food_amount": int,
    "pheromone_cap": float,
    "home_multiplier": float,
    "deposit_ramp": float,
    "home_bias": float,
    "strong_trail": float,
    "commit_trail": float,
    "obstacle_turn": float,
    "path_step": float,
    "food": list,
    "obstacles": list,
}

PARAM_BOUNDS = {
    "grid_size": GRID_BOUNDS["size"],
    **ColonySettings.BOUNDS,
}
