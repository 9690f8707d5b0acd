"""Overlapping translucent circles, triangles and rectangles."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Sequence

import numpy as np

from art.base_generator import ArtGenerator
from art.primitives import Shape
from art.rendering import WHITE, blend_draw, draw_shape, new_canvas, to_buffer
from art.settings import GeometricSettings
from core.pixels import clamp_channel, sample_color

TWO_PI = 2.0 * math.pi


class GeometricGenerator(ArtGenerator):
    style = "geometric"
    settings_class = GeometricSettings
    settings: GeometricSettings

    def _opacity_band(self) -> tuple[float, float]:
        low, high = self.settings.opacity_min, self.settings.opacity_max
        return min(low, high), max(low, high)

    def create_population(self) -> list[Shape]:
        """Lay shapes on a ``ceil(sqrt(n))`` grid, coloured from each cell centre."""
        target = self._require_target()
        count = self.settings.num_shapes
        cols = math.ceil(math.sqrt(count))
        rows = math.ceil(count / cols)
        cell_w = self.width / cols
        cell_h = self.height / rows
        low, high = self._opacity_band()
        shapes = []
        for index in range(count):
            x = (index % cols + 0.5) * cell_w
            y = (index // cols + 0.5) * cell_h
            kind = self.rng.choice(self.settings.shape_types)
            shapes.append(
                Shape(
                    kind=kind,
                    x=x,
                    y=y,
                    size=self._random_size(),
                    color=sample_color(target, x, y),
                    opacity=self.rng.uniform(low, high),
                    rotation=0.0 if kind == "circle" else self.rng.uniform(0.0, TWO_PI),
                    aspect=self.rng.uniform(0.5, 1.0),
                )
            )
        return shapes

    def mutate(self, shape: Shape) -> Shape:
        """Perturb exactly one property: x, y, size, colour or opacity/rotation."""
        choice = self.rng.randrange(5)
        if choice == 0:
            return replace(shape, x=self._jitter(shape.x, self.width, 0.0, self.width))
        if choice == 1:
            return replace(shape, y=self._jitter(shape.y, self.height, 0.0, self.height))
        if choice == 2:
            return replace(shape, size=self._scale_size(shape.size))
        if choice == 3:
            if self.rng.random() < self.settings.resample_probability:
                return replace(shape, color=sample_color(self._require_target(), shape.x, shape.y))
            channels = list(shape.color)
            channel = self.rng.randrange(3)
            delta = self.rng.uniform(-0.5, 0.5) * self.settings.color_jitter
            channels[channel] = clamp_channel(channels[channel] + delta)
            return replace(shape, color=tuple(channels))
        low, high = self._opacity_band()
        jitter = self.settings.opacity_jitter
        opacity = max(low, min(high, shape.opacity + self.rng.uniform(-jitter, jitter)))
        rotation = shape.rotation
        if shape.kind != "circle":
            rotation = (rotation + self.rng.uniform(-1.0, 1.0) * self.settings.rotation_jitter) % TWO_PI
        return replace(shape, opacity=opacity, rotation=rotation)

    def render(self, primitives: Sequence[Shape]) -> np.ndarray:
        canvas = new_canvas(self.width, self.height, WHITE)
        draw = blend_draw(canvas)
        for shape in sorted(primitives, key=lambda item: item.size, reverse=True):
            draw_shape(draw, shape)
        return to_buffer(canvas)
