"""Contract every EvoGallery engine plugin implements."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any


class Simulation(ABC):
    """One engine (Game of Life, boids, ant colony or a genetic-art style) driven tick by tick.

    The simulator calls ``reset`` once, then ``step`` per tick, reading
    ``get_metrics`` into its rolling history and ``get_render_state`` on
    rendered ticks.
    """

    def __init__(self, params: dict[str, Any], rng: random.Random) -> None:
        """Keep the validated, clamped params and this engine's RNG stream."""
        self.params = params
        self.rng = rng

    @abstractmethod
    def reset(self) -> None:
        """Build the starting grid, flock, colony or population."""

    @abstractmethod
    def step(self) -> None:
        """Advance one generation or tick."""

    @abstractmethod
    def get_metrics(self) -> dict[str, float]:
        """Scalar readings for this tick (live cells, alignment, fitness, ...)."""

    @abstractmethod
    def get_render_state(self) -> dict[str, Any]:
        """JSON-compatible snapshot of the world; always a fresh copy."""

    def close(self) -> None:
        """Hook for plugins holding resources; engines here hold none."""
        return None
