"""Drawable primitives evolved by the art generators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from core.pixels import Color

SHAPE_KINDS = ("circle", "rectangle", "triangle")


@dataclass(frozen=True)
class Shape:
    """Geometric shape; ``size`` is the radius of a circle or the side of a polygon."""

    kind: str
    x: float
    y: float
    size: float
    color: Color
    opacity: float
    rotation: float = 0.0
    aspect: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "x": float(self.x),
            "y": float(self.y),
            "size": float(self.size),
            "color": list(self.color),
            "opacity": float(self.opacity),
            "rotation": float(self.rotation),
            "aspect": float(self.aspect),
        }


@dataclass(frozen=True)
class Dot:
    x: float
    y: float
    radius: float
    color: Color

    @property
    def size(self) -> float:
        return self.radius

    def to_dict(self) -> dict[str, Any]:
        return {"x": float(self.x), "y": float(self.y), "radius": float(self.radius), "color": list(self.color)}


@dataclass(frozen=True)
class Tile:
    x: float
    y: float
    width: float
    height: float
    color: Color

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": float(self.x),
            "y": float(self.y),
            "width": float(self.width),
            "height": float(self.height),
            "color": list(self.color),
        }


@dataclass(frozen=True)
class GlassPanel:
    """Polygon panel; ``radius`` is the nominal size the points were generated with."""

    points: tuple[tuple[float, float], ...]
    center_x: float
    center_y: float
    radius: float
    color: Color

    def __post_init__(self) -> None:
        if len(self.points) < 3:
            raise ValueError(f"A glass panel needs at least 3 points, got {len(self.points)}.")

    @property
    def size(self) -> float:
        return self.radius

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": [[float(x), float(y)] for x, y in self.points],
            "center_x": float(self.center_x),
            "center_y": float(self.center_y),
            "radius": float(self.radius),
            "color": list(self.color),
        }


Primitive = Union[Shape, Dot, Tile, GlassPanel]
