"""Pillow rasterisation of primitives into RGBA pixel buffers."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np
from PIL import Image, ImageDraw

from art.primitives import Dot, GlassPanel, Shape, Tile
from core.pixels import Color

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)


def new_canvas(width: int, height: int, background: Sequence[int] = WHITE) -> Image.Image:
    """RGB canvas; drawing through ``blend_draw`` alpha-blends onto it."""
    return Image.new("RGB", (int(width), int(height)), tuple(int(c) for c in background[:3]))


def blend_draw(canvas: Image.Image) -> ImageDraw.ImageDraw:
    return ImageDraw.Draw(canvas, "RGBA")


def to_buffer(canvas: Image.Image) -> np.ndarray:
    return np.array(canvas.convert("RGBA"), dtype=np.uint8)


def to_image(buffer: np.ndarray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))


def _rotate(points: Iterable[tuple[float, float]], cx: float, cy: float, angle: float) -> list[tuple[float, float]]:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return [(cx + px * cos_a - py * sin_a, cy + px * sin_a + py * cos_a) for px, py in points]


def shape_outline(shape: Shape) -> list[tuple[float, float]]:
    """Corner points of a triangle or rectangle after rotation about its centre."""
    if shape.kind == "triangle":
        half_height = shape.size * math.sqrt(3) / 4
        local = [(0.0, -half_height), (-shape.size / 2, half_height), (shape.size / 2, half_height)]
    else:
        half_w = shape.size / 2
        half_h = shape.size * shape.aspect / 2
        local = [(-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)]
    return _rotate(local, shape.x, shape.y, shape.rotation)


def draw_shape(draw: ImageDraw.ImageDraw, shape: Shape) -> None:
    fill = (*shape.color[:3], int(round(shape.opacity * 255)))
    if shape.kind == "circle":
        r = shape.size
        draw.ellipse([shape.x - r, shape.y - r, shape.x + r, shape.y + r], fill=fill)
    else:
        draw.polygon(shape_outline(shape), fill=fill)


def draw_dot(draw: ImageDraw.ImageDraw, dot: Dot) -> None:
    r = dot.radius
    draw.ellipse([dot.x - r, dot.y - r, dot.x + r, dot.y + r], fill=tuple(dot.color))


def draw_tile(draw: ImageDraw.ImageDraw, tile: Tile, inset: float) -> None:
    x0, y0 = tile.x + inset, tile.y + inset
    x1, y1 = tile.x + tile.width - inset - 1, tile.y + tile.height - inset - 1
    if x1 < x0 or y1 < y0:
        return
    draw.rectangle([x0, y0, x1, y1], fill=tuple(tile.color))


def draw_panel(draw: ImageDraw.ImageDraw, panel: GlassPanel, border_color: Sequence[int], border_width: int) -> None:
    draw.polygon(list(panel.points), fill=tuple(panel.color))
    if border_width > 0:
        outline = list(panel.points) + [panel.points[0]]
        draw.line(outline, fill=tuple(border_color), width=int(border_width), joint="curve")
