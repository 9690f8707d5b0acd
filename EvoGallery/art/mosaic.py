"""Grid of flat tiles separated by grout."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Sequence

import numpy as np

from art.base_generator import ArtGenerator
from art.primitives import Tile
from art.rendering import blend_draw, draw_tile, new_canvas, to_buffer
from art.settings import MosaicSettings
from core.pixels import block_average, clamp_channel


def tile_grid(count: int, width: int, height: int) -> tuple[int, int]:
    """Columns and rows for roughly ``count`` tiles following the canvas aspect ratio."""
    aspect = width / height
    if aspect >= 1:
        cols = math.ceil(math.sqrt(count * aspect))
        rows = math.ceil(cols / aspect)
    else:
        rows = math.ceil(math.sqrt(count / aspect))
        cols = math.ceil(rows * aspect)
    return max(1, cols), max(1, rows)


class MosaicGenerator(ArtGenerator):
    style = "mosaic"
    settings_class = MosaicSettings
    settings: MosaicSettings

    def create_population(self) -> list[Tile]:
        target = self._require_target()
        cols, rows = tile_grid(self.settings.num_shapes, self.width, self.height)
        tile_w = self.width / cols
        tile_h = self.height / rows
        tiles = []
        for row in range(rows):
            for col in range(cols):
                x, y = col * tile_w, row * tile_h
                tiles.append(Tile(x=x, y=y, width=tile_w, height=tile_h, color=block_average(target, x, y, tile_w, tile_h)))
        return tiles

    def mutate(self, tile: Tile) -> Tile:
        """Nudge every channel, occasionally resetting to the block average."""
        if self.rng.random() < self.settings.resample_probability:
            return replace(tile, color=block_average(self._require_target(), tile.x, tile.y, tile.width, tile.height))
        jitter = self.settings.color_jitter
        r, g, b = (clamp_channel(channel + self.rng.uniform(-jitter, jitter)) for channel in tile.color[:3])
        return replace(tile, color=(r, g, b, tile.color[3]))

    def render(self, primitives: Sequence[Tile]) -> np.ndarray:
        canvas = new_canvas(self.width, self.height, self.settings.grout_color)
        draw = blend_draw(canvas)
        for tile in primitives:
            draw_tile(draw, tile, self.settings.grout_width)
        return to_buffer(canvas)
