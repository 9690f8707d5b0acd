"""Simulation plugin for boids."""

from __future__ import annotations

import random
from typing import Any

from simulations.base_simulation import Simulation
from simulations.boids.config_schema import MOUSE_INTERACTIONS
from simulations.boids.environment import FlockEnvironment
from simulations.boids.presets import apply_preset
from simulations.boids.rules import FlockSettings


class BoidsSimulation(Simulation):
    """Reynolds flocking on a wrapping canvas, with cursor and predator forces."""

    def __init__(self, params: dict[str, Any], rng: random.Random) -> None:
        super().__init__(params=params, rng=rng)
        preset = str(params.get("preset", ""))
        if preset:
            params = apply_preset(params, preset)
        mouse_interaction = str(params.get("mouse_interaction", "none"))
        if mouse_interaction not in MOUSE_INTERACTIONS:
            raise ValueError(
                f"mouse_interaction must be one of {MOUSE_INTERACTIONS}, got '{mouse_interaction}'."
            )
        self.settings = FlockSettings(
            alignment_force=float(params.get("alignment_force", 1.0)),
            cohesion_force=float(params.get("cohesion_force", 1.0)),
            separation_force=float(params.get("separation_force", 1.2)),
            visual_range=float(params.get("visual_range", 50.0)),
            separation_range=float(params.get("separation_range", 25.0)),
            number_of_boids=int(params.get("number_of_boids", 50)),
            max_speed=float(params.get("max_speed", 4.0)),
            max_force=float(params.get("max_force", 0.2)),
            mouse_interaction=mouse_interaction,
            mouse_force=float(params.get("mouse_force", 1.0)),
            mouse_radius=float(params.get("mouse_radius", 100.0)),
            number_of_predators=int(params.get("number_of_predators", 0)),
            predator_force=float(params.get("predator_force", 1.0)),
            predator_range_multiplier=float(params.get("predator_range_multiplier", 1.5)),
            predator_speed_multiplier=float(params.get("predator_speed_multiplier", 1.2)),
            group_radius=float(params.get("group_radius", 50.0)),
        )
        self.environment = FlockEnvironment(
            settings=self.settings,
            rng=rng,
            width=float(params.get("width", 800.0)),
            height=float(params.get("height", 600.0)),
        )

    def reset(self) -> None:
        self.environment.reset()

    def step(self) -> None:
        self.environment.step()

    def scatter(self) -> None:
        self.environment.scatter()

    def set_cursor(self, x: float | None, y: float | None = None) -> None:
        self.environment.set_cursor(x, y)

    def get_metrics(self) -> dict[str, float]:
        return self.environment.get_metrics()

    def get_render_state(self) -> dict[str, Any]:
        return self.environment.get_render_state()


SIMULATION_NAME = "boids"
SimulationClass = BoidsSimulation
