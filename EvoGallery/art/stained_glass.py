"""Leaded polygon panels over a black base."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from art.base_generator import ArtGenerator
from art.primitives import GlassPanel
from art.rendering import BLACK, blend_draw, draw_panel, new_canvas, to_buffer
from art.settings import StainedGlassSettings
from core.pixels import Color, neighbourhood_average


class StainedGlassGenerator(ArtGenerator):
    style = "stained-glass"
    settings_class = StainedGlassSettings
    settings: StainedGlassSettings

    def _alpha(self) -> int:
        return int(round(self.settings.panel_alpha * 255))

    def _sample(self, x: float, y: float) -> Color:
        return neighbourhood_average(self._require_target(), x, y, radius=2, alpha=self._alpha())

    def polygon(self, cx: float, cy: float) -> tuple[float, tuple[tuple[float, float], ...]]:
        """Irregular polygon around a centre: evenly spaced angles, 0.5-1.0 radius variance."""
        low = min(self.settings.min_points, self.settings.max_points)
        high = max(self.settings.min_points, self.settings.max_points)
        count = self.rng.randint(low, high)
        radius = self._random_size()
        points = []
        for index in range(count):
            angle = index / count * 2.0 * math.pi
            reach = radius * self.rng.uniform(0.5, 1.0)
            points.append((cx + math.cos(angle) * reach, cy + math.sin(angle) * reach))
        return radius, tuple(points)

    def create_population(self) -> list[GlassPanel]:
        panels = []
        for _ in range(self.settings.num_shapes):
            cx = self.rng.uniform(0.0, self.width)
            cy = self.rng.uniform(0.0, self.height)
            radius, points = self.polygon(cx, cy)
            panels.append(GlassPanel(points=points, center_x=cx, center_y=cy, radius=radius, color=self._sample(cx, cy)))
        return panels

    def mutate(self, panel: GlassPanel) -> GlassPanel:
        cx = self._jitter(panel.center_x, self.width, 0.0, self.width)
        cy = self._jitter(panel.center_y, self.height, 0.0, self.height)
        dx, dy = cx - panel.center_x, cy - panel.center_y
        radius = panel.radius
        if self.rng.random() < self.settings.regenerate_probability:
            radius, points = self.polygon(cx, cy)
        else:
            points = tuple((x + dx, y + dy) for x, y in panel.points)
        spread = self.settings.point_jitter
        points = tuple(
            (x + self.rng.uniform(-spread, spread), y + self.rng.uniform(-spread, spread)) for x, y in points
        )
        color = panel.color
        if self.rng.random() < self.settings.resample_probability:
            color = self._sample(cx, cy)
        return GlassPanel(points=points, center_x=cx, center_y=cy, radius=radius, color=color)

    def render(self, primitives: Sequence[GlassPanel]) -> np.ndarray:
        canvas = new_canvas(self.width, self.height, BLACK)
        draw = blend_draw(canvas)
        for panel in primitives:
            draw_panel(draw, panel, self.settings.border_color, self.settings.border_width)
        return to_buffer(canvas)
