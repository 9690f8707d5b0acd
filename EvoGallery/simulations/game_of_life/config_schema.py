"""Config schema for game_of_life simulation plugin."""

REQUIRED_PARAMS: dict = {}

DEFAULTS = {
    "rows": 100,
    "cols": 100,
    "initial_state": "random",
    "random_density": 0.3,
    "random_region": 40,
}

OPTIONAL_PARAMS = {
    "rows": int,
    "cols": int,
    "initial_state": str,
    "random_density": float,
    "random_region": int,
}

PARAM_BOUNDS = {
    "rows": (3, 500),
    "cols": (3, 500),
    "random_density": (0.0, 1.0),
    "random_region": (1, 500),
}
