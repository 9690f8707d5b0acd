"""Steering rules and flock-level statistics.

Every rule reads an immutable snapshot of the flock and returns a force
vector. Rules that find no neighbours return the zero vector.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import ClassVar, Sequence

from core.schema_validator import clamp_fields
from core.vector import ZERO, Vector, distance, limit, normalize
from simulations.boids.agents import Boid


@dataclass(frozen=True)
class FlockSettings:
    """Runtime parameters for the flocking engine."""

    alignment_force: float = 1.0
    cohesion_force: float = 1.0
    separation_force: float = 1.2
    visual_range: float = 50.0
    separation_range: float = 25.0
    number_of_boids: int = 50
    max_speed: float = 4.0
    max_force: float = 0.2
    mouse_interaction: str = "none"
    mouse_force: float = 1.0
    mouse_radius: float = 100.0
    number_of_predators: int = 0
    predator_force: float = 1.0
    predator_range_multiplier: float = 1.5
    predator_speed_multiplier: float = 1.2
    group_radius: float = 50.0

    BOUNDS: ClassVar[dict[str, tuple[float, float]]] = {
        "alignment_force": (0.0, 2.0),
        "cohesion_force": (0.0, 2.0),
        "separation_force": (0.0, 2.0),
        "visual_range": (20.0, 100.0),
        "separation_range": (10.0, 50.0),
        "number_of_boids": (0, 500),
        "max_speed": (1.0, 10.0),
        "max_force": (0.1, 1.0),
        "mouse_force": (0.0, 2.0),
        "mouse_radius": (20.0, 300.0),
        "number_of_predators": (0, 10),
        "predator_force": (0.0, 3.0),
        "predator_range_multiplier": (1.0, 3.0),
        "predator_speed_multiplier": (1.0, 2.0),
        "group_radius": (1.0, 200.0),
    }

    def __post_init__(self) -> None:
        clamp_fields(self, self.BOUNDS)

    @property
    def predator_range(self) -> float:
        return self.visual_range * self.predator_range_multiplier


@dataclass(frozen=True)
class FlockStats:
    average_speed: float
    alignment: float
    group_count: int


def _steer(desired: Vector, boid: Boid) -> Vector:
    """Shared pipeline: scale to max speed, subtract velocity, limit to max force."""
    steering = normalize(desired, boid.max_speed) - boid.velocity
    return limit(steering, boid.max_force)


def _neighbours(boid: Boid, flock: Sequence[Boid], radius: float) -> list[Boid]:
    return [
        other
        for other in flock
        if other is not boid and distance(boid.position, other.position) < radius
    ]


def alignment(boid: Boid, flock: Sequence[Boid], settings: FlockSettings) -> Vector:
    neighbours = _neighbours(boid, flock, settings.visual_range)
    if not neighbours:
        return ZERO
    heading = ZERO
    for other in neighbours:
        heading = heading + other.velocity
    heading = heading.scale(1.0 / len(neighbours))
    return _steer(heading, boid).scale(settings.alignment_force)


def cohesion(boid: Boid, flock: Sequence[Boid], settings: FlockSettings) -> Vector:
    neighbours = _neighbours(boid, flock, settings.visual_range)
    if not neighbours:
        return ZERO
    centre = ZERO
    for other in neighbours:
        centre = centre + other.position
    centre = centre.scale(1.0 / len(neighbours))
    return _steer(centre - boid.position, boid).scale(settings.cohesion_force)


def _repulsion(boid: Boid, others: Sequence[Boid]) -> Vector:
    """Average of away-vectors, each weighted by the inverse of its distance."""
    total = ZERO
    for other in others:
        gap = distance(boid.position, other.position)
        total = total + normalize(boid.position - other.position, 1.0 / max(gap, 0.1))
    return total.scale(1.0 / len(others))


def separation(boid: Boid, flock: Sequence[Boid], settings: FlockSettings) -> Vector:
    neighbours = _neighbours(boid, flock, settings.separation_range)
    if not neighbours:
        return ZERO
    return _steer(_repulsion(boid, neighbours), boid).scale(settings.separation_force)


def mouse_force(boid: Boid, cursor: Vector | None, settings: FlockSettings) -> Vector:
    """Attract toward or repel from ``cursor`` with linear falloff inside ``mouse_radius``."""
    if cursor is None or settings.mouse_interaction not in ("attract", "repel"):
        return ZERO
    gap = distance(boid.position, cursor)
    if gap >= settings.mouse_radius:
        return ZERO
    if settings.mouse_interaction == "attract":
        direction = cursor - boid.position
    else:
        direction = boid.position - cursor
    strength = boid.max_force * (1.0 - gap / settings.mouse_radius) * settings.mouse_force
    return normalize(direction, strength)


def predator_avoidance(boid: Boid, flock: Sequence[Boid], settings: FlockSettings) -> Vector:
    if boid.is_predator:
        return ZERO
    predators = [
        other
        for other in flock
        if other.is_predator and distance(boid.position, other.position) < settings.predator_range
    ]
    if not predators:
        return ZERO
    return _steer(_repulsion(boid, predators), boid).scale(settings.predator_force)


def predator_chase(boid: Boid, flock: Sequence[Boid], settings: FlockSettings) -> Vector:
    """Seek the nearest prey inside the predator range; zero when none is visible."""
    if not boid.is_predator:
        return ZERO
    nearest: Boid | None = None
    nearest_gap = settings.predator_range
    for other in flock:
        if other.is_predator:
            continue
        gap = distance(boid.position, other.position)
        if gap < nearest_gap:
            nearest, nearest_gap = other, gap
    if nearest is None:
        return ZERO
    return _steer(nearest.position - boid.position, boid).scale(settings.predator_force)


def total_force(
    boid: Boid,
    flock: Sequence[Boid],
    settings: FlockSettings,
    cursor: Vector | None = None,
) -> Vector:
    """Sum every force acting on ``boid``; predators only chase."""
    if boid.is_predator:
        return predator_chase(boid, flock, settings) + mouse_force(boid, cursor, settings)
    return (
        alignment(boid, flock, settings)
        + cohesion(boid, flock, settings)
        + separation(boid, flock, settings)
        + mouse_force(boid, cursor, settings)
        + predator_avoidance(boid, flock, settings)
    )


def _wrap(value: float, extent: float) -> float:
    """Fold ``value`` into ``[0, extent)``; float modulo can return ``extent`` itself."""
    wrapped = value % extent
    return 0.0 if wrapped >= extent else wrapped


def update_flock(
    flock: Sequence[Boid],
    settings: FlockSettings,
    width: float,
    height: float,
    cursor: Vector | None = None,
) -> tuple[Boid, ...]:
    """Advance every boid one tick against the same snapshot of ``flock``."""
    updated = []
    for boid in flock:
        force = total_force(boid, flock, settings, cursor)
        velocity = limit(boid.velocity + force, boid.max_speed)
        position = Vector(
            _wrap(boid.position.x + velocity.x, width),
            _wrap(boid.position.y + velocity.y, height),
        )
        updated.append(
            Boid(
                position=position,
                velocity=velocity,
                max_speed=boid.max_speed,
                max_force=boid.max_force,
                acceleration=force,
                is_predator=boid.is_predator,
            )
        )
    return tuple(updated)


def count_groups(flock: Sequence[Boid], group_radius: float = 50.0) -> int:
    """Connected components of the proximity graph, found breadth-first."""
    visited = [False] * len(flock)
    groups = 0
    for start in range(len(flock)):
        if visited[start]:
            continue
        groups += 1
        visited[start] = True
        queue = deque([start])
        while queue:
            current = flock[queue.popleft()]
            for index, other in enumerate(flock):
                if not visited[index] and distance(current.position, other.position) < group_radius:
                    visited[index] = True
                    queue.append(index)
    return groups


def flock_stats(flock: Sequence[Boid], group_radius: float = 50.0) -> FlockStats:
    """Average speed, heading alignment in [0, 1] and group count over non-predators."""
    prey = [boid for boid in flock if not boid.is_predator]
    if not prey:
        return FlockStats(average_speed=0.0, alignment=0.0, group_count=0)

    total_speed = 0.0
    heading = ZERO
    for boid in prey:
        total_speed += boid.velocity.magnitude()
        heading = heading + normalize(boid.velocity)
    return FlockStats(
        average_speed=total_speed / len(prey),
        alignment=min(1.0, heading.magnitude() / len(prey)),
        group_count=count_groups(prey, group_radius),
    )
