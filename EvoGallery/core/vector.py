"""Immutable 2D vector math shared by the flocking and ant engines."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """Plain 2D vector value."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def to_list(self) -> list[float]:
        return [float(self.x), float(self.y)]


ZERO = Vector(0.0, 0.0)


def distance(a: Vector, b: Vector) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def normalize(vector: Vector, magnitude: float = 1.0) -> Vector:
    """Rescale ``vector`` to ``magnitude``; zero-length input yields the zero vector."""
    length = vector.magnitude()
    if length == 0.0 or not math.isfinite(length):
        return ZERO
    ratio = magnitude / length
    return Vector(vector.x * ratio, vector.y * ratio)


def limit(vector: Vector, max_magnitude: float) -> Vector:
    """Clamp ``vector`` length to ``max_magnitude`` keeping its direction."""
    if max_magnitude <= 0.0:
        return ZERO
    length_sq = vector.x * vector.x + vector.y * vector.y
    if length_sq > max_magnitude * max_magnitude:
        ratio = max_magnitude / math.sqrt(length_sq)
        return Vector(vector.x * ratio, vector.y * ratio)
    return vector


def from_angle(angle: float, magnitude: float = 1.0) -> Vector:
    return Vector(math.cos(angle) * magnitude, math.sin(angle) * magnitude)


def wrap_angle(angle: float) -> float:
    """Map an angle in radians into ``[-pi, pi)``."""
    return (angle + math.pi) % (2.0 * math.pi) - math.pi
