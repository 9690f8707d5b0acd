"""Config schema for boids simulation plugin."""

from simulations.boids.rules import FlockSettings

REQUIRED_PARAMS: dict = {}

DEFAULTS = {
    "preset": "",
    "width": 800.0,
    "height": 600.0,
    "alignment_force": 1.0,
    "cohesion_force": 1.0,
    "separation_force": 1.2,
    "visual_range": 50.0,
    "separation_range": 25.0,
    "number_of_boids": 50,
    "max_speed": 4.0,
    "max_force": 0.2,
    "mouse_interaction": "none",
    "mouse_force": 1.0,
    "mouse_radius": 100.0,
    "number_of_predators": 0,
    "predator_force": 1.0,
    "predator_range_multiplier": 1.5,
    "predator_speed_multiplier": 1.2,
    "group_radius": 50.0,
}

OPTIONAL_PARAMS = {
    "preset": str,
    "width": float,
    "height": float,
    "alignment_force": float,
    "cohesion_force": float,
    "separation_force": float,
    "visual_range": float,
    "separation_range": float,
    "number_of_boids": int,
    "max_speed": float,
    "max_force": float,
    "mouse_interaction": str,
    "mouse_force": float,
    "mouse_radius": float,
    "number_of_predators": int,
    "predator_force": float,
    "predator_range_multiplier": float,
    "predator_speed_multiplier": float,
    "group_radius": float,
}

PARAM_BOUNDS = {
    "width": (50.0, 4000.0),
    "height": (50.0, 4000.0),
    **FlockSettings.BOUNDS,
}

MOUSE_INTERACTIONS = ("none", "attract", "repel")
