"""Named flocking presets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class FlockPreset:
    name: str
    description: str
    settings: Mapping[str, Any] = field(default_factory=dict)


PRESETS: dict[str, FlockPreset] = {
    "default": FlockPreset(
        "Default Flock",
        "Balanced flocking behavior",
        {
            "alignment_force": 1.0,
            "cohesion_force": 1.0,
            "separation_force": 1.2,
            "visual_range": 50.0,
            "separation_range": 25.0,
            "number_of_boids": 100,
            "max_speed": 4.0,
            "max_force": 0.2,
        },
    ),
    "tight": FlockPreset(
        "Tight Formation",
        "Boids stay close together",
        {
            "alignment_force": 1.5,
            "cohesion_force": 1.5,
            "separation_force": 0.8,
            "visual_range": 60.0,
            "separation_range": 20.0,
            "number_of_boids": 100,
            "max_speed": 3.0,
            "max_force": 0.2,
        },
    ),
    "scattered": FlockPreset(
        "Scattered Groups",
        "Boids form multiple small groups",
        {
            "alignment_force": 0.8,
            "cohesion_force": 0.8,
            "separation_force": 1.5,
            "visual_range": 40.0,
            "separation_range": 30.0,
            "number_of_boids": 100,
            "max_speed": 5.0,
            "max_force": 0.3,
        },
    ),
}


def apply_preset(params: Mapping[str, Any], name: str) -> dict[str, Any]:
    """Return ``params`` with the values of preset ``name`` laid over them."""
    preset = PRESETS.get(name)
    if preset is None:
        available = ", ".join(sorted(PRESETS))
        raise KeyError(f"Unknown boids preset '{name}'. Available presets: {available}")
    merged = dict(params)
    merged.update(preset.settings)
    return merged
