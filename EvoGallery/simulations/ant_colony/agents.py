"""Agent model for the ant_colony plugin."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any

from core.vector import Vector, distance


@dataclass
class Ant:
    """Single forager; position has sub-cell precision."""

    ant_id: int
    x: float
    y: float
    direction: float
    has_food: bool = False
    path: deque[Vector] = field(default_factory=lambda: deque(maxlen=20))

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y)

    def record_position(self, min_step: float) -> None:
        """Append the current position once the ant has moved ``min_step`` past the last entry."""
        if not self.path or distance(self.path[-1], self.position) > min_step:
            self.path.append(self.position)

    def path_length(self) -> float:
        points = list(self.path)
        return sum(distance(a, b) for a, b in zip(points, points[1:]))

    def to_dict(self) -> dict[str, Any]:
        """Serialize ant state for render/export."""
        return {
            "id": int(self.ant_id),
            "x": float(self.x),
            "y": float(self.y),
            "direction": float(self.direction),
            "has_food": bool(self.has_food),
            "path": [point.to_list() for point in self.path],
        }
