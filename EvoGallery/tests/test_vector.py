"""Tests for 2D vector helpers."""

from __future__ import annotations

import math

import pytest

from core.vector import ZERO, Vector, distance, from_angle, limit, normalize, wrap_angle


def test_normalize_scales_to_requested_magnitude() -> None:
    unit = normalize(Vector(3.0, 4.0))
    assert unit.x == pytest.approx(0.6)
    assert unit.y == pytest.approx(0.8)

    scaled = normalize(Vector(3.0, 4.0), 10.0)
    assert scaled.x == pytest.approx(6.0)
    assert scaled.y == pytest.approx(8.0)


def test_normalize_zero_vector_returns_zero_not_nan() -> None:
    result = normalize(ZERO, 5.0)
    assert result == ZERO
    assert not math.isnan(result.x)


def test_limit_only_shrinks_long_vectors() -> None:
    assert limit(Vector(0.3, 0.4), 1.0) == Vector(0.3, 0.4)
    clamped = limit(Vector(30.0, 40.0), 5.0)
    assert clamped.magnitude() == pytest.approx(5.0)
    assert clamped.x == pytest.approx(3.0)
    assert limit(Vector(1.0, 1.0), 0.0) == ZERO


def test_distance_and_from_angle() -> None:
    assert distance(Vector(0.0, 0.0), Vector(3.0, 4.0)) == pytest.approx(5.0)
    east = from_angle(0.0, 2.0)
    assert east.x == pytest.approx(2.0)
    assert east.y == pytest.approx(0.0)


def test_wrap_angle_maps_into_half_open_range() -> None:
    assert wrap_angle(1.5 * math.pi) == pytest.approx(-0.5 * math.pi)
    assert wrap_angle(-0.5 * math.pi) == pytest.approx(-0.5 * math.pi)
    assert wrap_angle(math.pi) == pytest.approx(-math.pi)
    for angle in (-10.0, -3.5, 0.0, 2.0, 7.0, 100.0):
        wrapped = wrap_angle(angle)
        assert -math.pi <= wrapped < math.pi
