"""Simulation plugin for genetic_art."""

from __future__ import annotations

import random
from typing import Any

from PIL import Image

from art.factory import create_generator
from art.rendering import to_image
from simulations.base_simulation import Simulation
from simulations.genetic_art.config_schema import GENERATOR_KEYS
from simulations.genetic_art.targets import build_target


class GeneticArtSimulation(Simulation):
    """Drives one art generator; each tick is one ``evolve()`` call."""

    def __init__(self, params: dict[str, Any], rng: random.Random) -> None:
        super().__init__(params=params, rng=rng)
        self.style = str(params.get("style", "geometric"))
        self.width = int(params.get("width", 100))
        self.height = int(params.get("height", 100))
        generator_params = {key: params[key] for key in GENERATOR_KEYS if key in params}
        self.generator = create_generator(self.style, generator_params, rng=rng)
        self.target = build_target(
            self.width,
            self.height,
            target_image=str(params.get("target_image", "")),
            target_color=str(params.get("target_color", "#ff0000")),
        )
        self._last_fitness = 0.0
        self._improved = False

    def reset(self) -> None:
        self.generator.initialize((self.width, self.height), self.target)
        self._last_fitness = 0.0
        self._improved = False

    def step(self) -> None:
        result = self.generator.evolve()
        self._improved = result.fitness > self._last_fitness
        self._last_fitness = result.fitness

    def current_image(self) -> Image.Image:
        """Rendered population as a Pillow image, for saving by the caller."""
        state = self.generator.state
        if state is None:
            self.reset()
            state = self.generator.state
        return to_image(state.pixels)

    def get_metrics(self) -> dict[str, float]:
        state = self.generator.state
        if state is None:
            return {"fitness": 0.0, "generation": 0.0, "primitive_count": 0.0, "improved": 0.0}
        return {
            "fitness": float(state.best_fitness),
            "generation": float(state.generation),
            "primitive_count": float(len(state.primitives)),
            "improved": 1.0 if self._improved else 0.0,
        }

    def get_render_state(self) -> dict[str, Any]:
        payload = self.generator.get_snapshot()
        payload["simulation"] = SIMULATION_NAME
        payload["step"] = int(payload["generation"])
        return payload


SIMULATION_NAME = "genetic_art"
SimulationClass = GeneticArtSimulation
