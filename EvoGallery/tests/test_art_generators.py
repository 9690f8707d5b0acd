"""Tests for the four art generators and their shared hill climber."""

from __future__ import annotations

import json
import random

import numpy as np
import pytest

from art.base_generator import GeneratorNotInitializedError
from art.factory import GENERATORS, UnknownArtStyleError, create_generator, resolve_style
from art.geometric import GeometricGenerator
from art.mosaic import tile_grid
from art.primitives import GlassPanel
from art.settings import GeometricSettings
from art.stained_glass import StainedGlassGenerator
from core.pixels import PixelBufferMismatchError, compare_images, solid_buffer

WIDTH, HEIGHT = 40, 30

SMALL_SETTINGS = {
    "geometric": {"num_shapes": 12, "min_size": 3.0, "max_size": 8.0},
    "pointillism": {"num_shapes": 60, "min_size": 2.0, "max_size": 4.0},
    "mosaic": {"num_shapes": 12},
    "stained-glass": {"num_shapes": 10, "min_size": 5.0, "max_size": 12.0},
}


def _gradient() -> np.ndarray:
    buffer = np.zeros((HEIGHT, WIDTH, 4), dtype=np.uint8)
    buffer[..., 0] = np.linspace(0, 255, WIDTH, dtype=np.uint8)[None, :]
    buffer[..., 1] = np.linspace(255, 0, HEIGHT, dtype=np.uint8)[:, None]
    buffer[..., 2] = 90
    buffer[..., 3] = 255
    return buffer


def _generator(style: str, seed: int = 1):
    generator = create_generator(style, SMALL_SETTINGS[style], rng=random.Random(seed))
    generator.initialize((WIDTH, HEIGHT), _gradient())
    return generator


@pytest.mark.parametrize("style", sorted(GENERATORS))
def test_best_fitness_never_decreases(style: str) -> None:
    generator = _generator(style)
    previous = 0.0
    for expected_generation in range(1, 31):
        result = generator.evolve()
        assert 0.0 <= result.fitness <= 1.0
        assert result.fitness >= previous
        assert result.generation == expected_generation
        assert result.pixels.shape == (HEIGHT, WIDTH, 4)
        previous = result.fitness
    assert generator.fitness(generator.state.pixels) == pytest.approx(generator.state.best_fitness)


@pytest.mark.parametrize("style", sorted(GENERATORS))
def test_primitives_stay_inside_bounds(style: str) -> None:
    generator = _generator(style, seed=4)
    settings = generator.settings
    for _ in range(40):
        generator.evolve()
    for primitive in generator.state.primitives:
        for channel in primitive.color:
            assert 0 <= channel <= 255
        if style == "mosaic":
            continue
        assert settings.min_size <= primitive.size <= settings.max_size
        x = primitive.center_x if isinstance(primitive, GlassPanel) else primitive.x
        y = primitive.center_y if isinstance(primitive, GlassPanel) else primitive.y
        assert 0.0 <= x <= WIDTH
        assert 0.0 <= y <= HEIGHT


def test_mutated_geometric_shapes_respect_opacity_band() -> None:
    generator = _generator("geometric", seed=9)
    shape = generator.state.primitives[0]
    for _ in range(200):
        shape = generator.mutate(shape)
        assert generator.settings.opacity_min <= shape.opacity <= generator.settings.opacity_max
        assert shape.kind in generator.settings.shape_types


def test_geometric_approaches_a_solid_target() -> None:
    target = solid_buffer(40, 40, (255, 0, 0))
    generator = GeometricGenerator(rng=random.Random(21))
    generator.settings = generator.settings_class.from_params(
        {"num_shapes": 50, "min_size": 5.0, "max_size": 20.0, "mutation_rate": 0.1}
    )
    generator.initialize((40, 40), target)

    first = generator.evolve().fitness
    for _ in range(200):
        last = generator.evolve().fitness
    assert last > first
    assert first > compare_images(solid_buffer(40, 40, (255, 255, 255)), target)


def test_advance_leaves_the_input_state_untouched() -> None:
    generator = _generator("mosaic")
    before = generator.state
    primitives = before.primitives
    pixels = before.pixels.copy()

    after = generator.advance(before)

    assert after is not before
    assert after.generation == 1
    assert before.generation == 0
    assert before.primitives is primitives
    assert np.array_equal(before.pixels, pixels)
    assert generator.state is before


def test_evolve_before_initialize_raises() -> None:
    generator = create_generator("pointillism", rng=random.Random(0))
    with pytest.raises(GeneratorNotInitializedError):
        generator.evolve()
    with pytest.raises(GeneratorNotInitializedError):
        generator.get_snapshot()


def test_initialize_rejects_mismatched_or_rgb_targets() -> None:
    generator = create_generator("geometric", rng=random.Random(0))
    with pytest.raises(PixelBufferMismatchError):
        generator.initialize((50, 50), _gradient())
    with pytest.raises(PixelBufferMismatchError):
        generator.initialize((WIDTH, HEIGHT), np.zeros((HEIGHT, WIDTH, 3), dtype=np.uint8))


def test_reset_restarts_best_fitness_and_generation() -> None:
    generator = _generator("geometric")
    for _ in range(5):
        generator.evolve()
    state = generator.reset()
    assert state.best_fitness == 0.0
    assert state.generation == 0
    assert len(state.primitives) == 12


def test_reinitialize_swaps_target_and_canvas() -> None:
    generator = _generator("stained-glass")
    generator.evolve()
    state = generator.reinitialize((20, 10), solid_buffer(20, 10, (0, 0, 255)))
    assert generator.width == 20
    assert generator.height == 10
    assert state.pixels.shape == (10, 20, 4)
    assert state.generation == 0


def test_target_copy_is_read_only() -> None:
    target = _gradient()
    generator = create_generator("mosaic", {"num_shapes": 12}, rng=random.Random(0))
    generator.initialize((WIDTH, HEIGHT), target)
    target[...] = 0
    assert generator.target[0, -1, 0] == 255
    with pytest.raises(ValueError):
        generator.target[0, 0, 0] = 1


def test_snapshot_is_json_serializable() -> None:
    for style in GENERATORS:
        generator = _generator(style)
        generator.evolve()
        snapshot = generator.get_snapshot()
        decoded = json.loads(json.dumps(snapshot))
        assert decoded["style"] == style
        assert decoded["generation"] == 1
        assert len(decoded["primitives"]) == len(generator.state.primitives)


def test_style_lookup_and_alias() -> None:
    assert resolve_style("stained_glass") == "stained-glass"
    assert isinstance(create_generator("stained_glass"), StainedGlassGenerator)
    with pytest.raises(UnknownArtStyleError, match="Available styles"):
        create_generator("watercolour")


def test_mosaic_tile_grid_follows_aspect_ratio() -> None:
    assert tile_grid(200, 100, 100) == (15, 15)
    assert tile_grid(200, 50, 100) == (10, 20)
    assert tile_grid(200, 100, 50) == (20, 10)


def test_mosaic_tiles_cover_the_canvas() -> None:
    generator = _generator("mosaic")
    cols, rows = tile_grid(12, WIDTH, HEIGHT)
    assert len(generator.state.primitives) == cols * rows
    last = generator.state.primitives[-1]
    assert last.x + last.width == pytest.approx(WIDTH)
    assert last.y + last.height == pytest.approx(HEIGHT)


def test_stained_glass_polygon_has_configured_point_count() -> None:
    generator = _generator("stained-glass")
    for _ in range(20):
        radius, points = generator.polygon(20.0, 15.0)
        assert 5 <= len(points) <= 7
        assert generator.settings.min_size <= radius <= generator.settings.max_size


def test_glass_panel_needs_three_points() -> None:
    with pytest.raises(ValueError, match="at least 3 points"):
        GlassPanel(points=((0.0, 0.0), (1.0, 1.0)), center_x=0.0, center_y=0.0, radius=1.0, color=(0, 0, 0, 255))


def test_generator_built_from_out_of_band_settings_stays_in_range() -> None:
    settings = GeometricSettings(num_shapes=0, mutation_rate=7.0, opacity_min=-2.0, opacity_max=3.0)
    generator = create_generator("geometric", settings, rng=random.Random(12))
    generator.initialize((20, 20), solid_buffer(20, 20, (0, 128, 255)))

    assert len(generator.state.primitives) == 10
    for _ in range(30):
        generator.evolve()
        for shape in generator.state.primitives:
            assert 0.1 <= shape.opacity <= 0.9
