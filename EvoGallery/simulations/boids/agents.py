"""Agent model for the boids plugin."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from core.vector import ZERO, Vector


@dataclass(frozen=True)
class Boid:
    """Single flocking agent; a tick replaces boids instead of mutating them."""

    position: Vector
    velocity: Vector
    max_speed: float
    max_force: float
    acceleration: Vector = ZERO
    is_predator: bool = False

    def with_velocity(self, velocity: Vector) -> Boid:
        return replace(self, velocity=velocity)

    def to_dict(self) -> dict[str, Any]:
        """Serialize boid state for render/export."""
        return {
            "position": self.position.to_list(),
            "velocity": self.velocity.to_list(),
            "acceleration": self.acceleration.to_list(),
            "max_speed": float(self.max_speed),
            "max_force": float(self.max_force),
            "is_predator": bool(self.is_predator),
        }
