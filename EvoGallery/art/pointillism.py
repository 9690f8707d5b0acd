"""Semi-transparent dots at random positions."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

import numpy as np

from art.base_generator import ArtGenerator
from art.primitives import Dot
from art.rendering import WHITE, blend_draw, draw_dot, new_canvas, to_buffer
from art.settings import PointillismSettings
from core.pixels import sample_color


class PointillismGenerator(ArtGenerator):
    style = "pointillism"
    settings_class = PointillismSettings
    settings: PointillismSettings

    def _alpha(self) -> int:
        return int(round(self.settings.dot_alpha * 255))

    def create_population(self) -> list[Dot]:
        target = self._require_target()
        dots = []
        for _ in range(self.settings.num_shapes):
            x = self.rng.uniform(0.0, self.width)
            y = self.rng.uniform(0.0, self.height)
            dots.append(Dot(x=x, y=y, radius=self._random_size(), color=sample_color(target, x, y, self._alpha())))
        return dots

    def mutate(self, dot: Dot) -> Dot:
        x = self._jitter(dot.x, self.width, 0.0, self.width)
        y = self._jitter(dot.y, self.height, 0.0, self.height)
        color = dot.color
        if self.rng.random() < self.settings.resample_probability:
            color = sample_color(self._require_target(), x, y, self._alpha())
        return replace(dot, x=x, y=y, radius=self._scale_size(dot.radius), color=color)

    def render(self, primitives: Sequence[Dot]) -> np.ndarray:
        canvas = new_canvas(self.width, self.height, WHITE)
        draw = blend_draw(canvas)
        for dot in sorted(primitives, key=lambda item: item.radius, reverse=True):
            draw_dot(draw, dot)
        return to_buffer(canvas)
