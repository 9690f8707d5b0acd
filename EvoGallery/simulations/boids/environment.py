"""Toroidal canvas holding a flock of boids and optional predators."""

from __future__ import annotations

import math
import random
from typing import Any

from core.vector import Vector, from_angle
from simulations.boids.agents import Boid
from simulations.boids.rules import FlockSettings, flock_stats, update_flock


class FlockEnvironment:
    """Owns the flock, the cursor and the tick counter."""

    def __init__(self, settings: FlockSettings, rng: random.Random, width: float = 800.0, height: float = 600.0) -> None:
        self.settings = settings
        self.rng = rng
        self.width = float(width)
        self.height = float(height)
        self.step_count = 0
        self.boids: tuple[Boid, ...] = ()
        self.cursor: Vector | None = None

    def _spawn(self, is_predator: bool) -> Boid:
        multiplier = self.settings.predator_speed_multiplier if is_predator else 1.0
        max_speed = self.settings.max_speed * multiplier
        heading = self.rng.uniform(0.0, 2.0 * math.pi)
        speed = self.rng.uniform(0.5, 1.0) * max_speed
        return Boid(
            position=Vector(self.rng.uniform(0.0, self.width), self.rng.uniform(0.0, self.height)),
            velocity=from_angle(heading, speed),
            max_speed=max_speed,
            max_force=self.settings.max_force * multiplier,
            is_predator=is_predator,
        )

    def reset(self) -> None:
        """Recreate the flock at random positions and headings."""
        self.step_count = 0
        self.cursor = None
        flock = [self._spawn(False) for _ in range(max(0, self.settings.number_of_boids))]
        flock.extend(self._spawn(True) for _ in range(max(0, self.settings.number_of_predators)))
        self.boids = tuple(flock)

    def scatter(self) -> None:
        """Throw every boid in a random direction at up to twice the speed limit."""
        spread = self.settings.max_speed * 2.0
        self.boids = tuple(
            boid.with_velocity(
                Vector(self.rng.uniform(-1.0, 1.0) * spread, self.rng.uniform(-1.0, 1.0) * spread)
            )
            for boid in self.boids
        )

    def set_cursor(self, x: float | None, y: float | None = None) -> None:
        """Set the interaction point, or clear it with ``None``."""
        if x is None or y is None:
            self.cursor = None
        else:
            self.cursor = Vector(float(x), float(y))

    def step(self) -> None:
        self.boids = update_flock(self.boids, self.settings, self.width, self.height, self.cursor)
        self.step_count += 1

    def get_metrics(self) -> dict[str, float]:
        stats = flock_stats(self.boids, self.settings.group_radius)
        return {
            "average_speed": float(stats.average_speed),
            "alignment": float(stats.alignment),
            "group_count": float(stats.group_count),
            "boid_count": float(sum(1 for boid in self.boids if not boid.is_predator)),
            "predator_count": float(sum(1 for boid in self.boids if boid.is_predator)),
        }

    def get_render_state(self) -> dict[str, Any]:
        return {
            "simulation": "boids",
            "step": int(self.step_count),
            "width": self.width,
            "height": self.height,
            "cursor": None if self.cursor is None else self.cursor.to_list(),
            "boids": [boid.to_dict() for boid in self.boids],
        }
