"""Config schema for genetic_art simulation plugin.

Style-specific generator settings are optional; anything left out uses the
style's own defaults.
"""

REQUIRED_PARAMS: dict = {}

DEFAULTS = {
    "style": "geometric",
    "width": 100,
    "height": 100,
    "target_image": "",
    "target_color": "#ff0000",
}

OPTIONAL_PARAMS = {
    "style": str,
    "width": int,
    "height": int,
    "target_image": str,
    "target_color": str,
    "num_shapes": int,
    "min_size": float,
    "max_size": float,
    "mutation_rate": float,
    "resample_probability": float,
    "position_jitter": float,
    "shape_types": list,
    "opacity_min": float,
    "opacity_max": float,
    "opacity_jitter": float,
    "rotation_jitter": float,
    "color_jitter": float,
    "dot_alpha": float,
    "grout_width": int,
    "grout_color": str,
    "panel_alpha": float,
    "min_points": int,
    "max_points": int,
    "point_jitter": float,
    "regenerate_probability": float,
    "border_width": int,
    "border_color": str,
}

PARAM_BOUNDS = {
    "width": (8, 2048),
    "height": (8, 2048),
    "mutation_rate": (0.01, 0.5),
}

GENERATOR_KEYS = tuple(key for key in OPTIONAL_PARAMS if key not in DEFAULTS)
