"""Hill-climbing contract shared by every art style.

A generator owns the target buffer, settings and RNG. The evolutionary state
itself lives in immutable :class:`GeneratorState` values: ``advance`` maps one
state to the next, while ``evolve`` keeps the current state for callers that
just want to tick.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Sequence

import numpy as np

from art.primitives import Primitive
from art.settings import ArtSettings
from core.pixels import PixelBufferMismatchError, buffer_size, compare_images, ensure_buffer

LOGGER = logging.getLogger(__name__)


class GeneratorNotInitializedError(RuntimeError):
    """Raised when a generator is stepped before ``initialize``."""


@dataclass(frozen=True)
class GeneratorState:
    """Current (and, under elitism, best) population with its score."""

    primitives: tuple[Primitive, ...]
    best_fitness: float
    generation: int
    pixels: np.ndarray


@dataclass(frozen=True)
class EvolveResult:
    fitness: float
    primitives: tuple[Primitive, ...]
    generation: int
    pixels: np.ndarray


class ArtGenerator(ABC):
    """Elitist single-population hill climber over a tuple of primitives."""

    style: str = ""
    settings_class: type[ArtSettings] = ArtSettings

    def __init__(self, settings: ArtSettings | None = None, rng: random.Random | None = None) -> None:
        self.settings = settings if settings is not None else self.settings_class()
        self.rng = rng if rng is not None else random.Random()
        self.width = 0
        self.height = 0
        self.target: np.ndarray | None = None
        self.state: GeneratorState | None = None

    @abstractmethod
    def create_population(self) -> list[Primitive]:
        """Seed a fresh population from the target."""

    @abstractmethod
    def mutate(self, primitive: Primitive) -> Primitive:
        """Return a perturbed copy of one primitive."""

    @abstractmethod
    def render(self, primitives: Sequence[Primitive]) -> np.ndarray:
        """Rasterise ``primitives`` into a new ``(height, width, 4)`` buffer."""

    def initialize(
        self,
        canvas_size: tuple[int, int],
        target: np.ndarray,
        settings: ArtSettings | None = None,
    ) -> GeneratorState:
        """Bind canvas, target and settings, then build the first population."""
        width, height = int(canvas_size[0]), int(canvas_size[1])
        target = ensure_buffer(target)
        if buffer_size(target) != (width, height):
            raise PixelBufferMismatchError(
                f"Target is {buffer_size(target)} but canvas is {(width, height)}."
            )
        if settings is not None:
            self.settings = settings
        self.width, self.height = width, height
        self.target = target.copy()
        self.target.setflags(write=False)
        return self.reset()

    def reinitialize(
        self,
        canvas_size: tuple[int, int],
        target: np.ndarray,
        settings: ArtSettings | None = None,
    ) -> GeneratorState:
        return self.initialize(canvas_size, target, settings)

    def reset(self) -> GeneratorState:
        """Drop best-fitness tracking and seed a new population."""
        self._require_target()
        primitives = tuple(self.create_population())
        self.state = GeneratorState(
            primitives=primitives,
            best_fitness=0.0,
            generation=0,
            pixels=self.render(primitives),
        )
        LOGGER.debug("%s generator reset with %d primitives.", self.style, len(primitives))
        return self.state

    def fitness(self, pixels: np.ndarray) -> float:
        return compare_images(pixels, self._require_target())

    def advance(self, state: GeneratorState) -> GeneratorState:
        """One hill-climbing step: mutate, render, score, keep only strict improvements."""
        self._require_target()
        rate = self.settings.mutation_rate
        mutated = tuple(
            self.mutate(primitive) if self.rng.random() < rate else primitive
            for primitive in state.primitives
        )
        pixels = self.render(mutated)
        score = self.fitness(pixels)
        if score > state.best_fitness:
            return GeneratorState(
                primitives=mutated,
                best_fitness=score,
                generation=state.generation + 1,
                pixels=pixels,
            )
        return replace(state, generation=state.generation + 1)

    def evolve(self) -> EvolveResult:
        if self.state is None:
            raise GeneratorNotInitializedError(f"{self.style} generator must be initialized before evolve().")
        self.state = self.advance(self.state)
        return EvolveResult(
            fitness=self.state.best_fitness,
            primitives=self.state.primitives,
            generation=self.state.generation,
            pixels=self.state.pixels.copy(),
        )

    def get_snapshot(self) -> dict[str, Any]:
        """JSON-serializable description of the current population."""
        if self.state is None:
            raise GeneratorNotInitializedError(f"{self.style} generator has no state yet.")
        return {
            "style": self.style,
            "width": self.width,
            "height": self.height,
            "generation": int(self.state.generation),
            "fitness": float(self.state.best_fitness),
            "settings": self.settings.to_dict(),
            "primitives": [primitive.to_dict() for primitive in self.state.primitives],
        }

    def _require_target(self) -> np.ndarray:
        if self.target is None:
            raise GeneratorNotInitializedError(f"{self.style} generator has no target; call initialize() first.")
        return self.target

    def _jitter(self, value: float, extent: float, low: float, high: float) -> float:
        """Shift ``value`` by up to ``position_jitter * extent`` and clamp to ``[low, high]``."""
        offset = self.rng.uniform(-1.0, 1.0) * self.settings.position_jitter * extent
        return max(low, min(high, value + offset))

    def _scale_size(self, size: float) -> float:
        scaled = size * self.rng.uniform(0.8, 1.2)
        return max(self.settings.min_size, min(self.settings.max_size, scaled))

    def _random_size(self) -> float:
        return self.rng.uniform(self.settings.min_size, self.settings.max_size)
