"""Style tag to generator class mapping."""

from __future__ import annotations

import random
from typing import Any, Mapping

from art.base_generator import ArtGenerator
from art.geometric import GeometricGenerator
from art.mosaic import MosaicGenerator
from art.pointillism import PointillismGenerator
from art.settings import ArtSettings
from art.stained_glass import StainedGlassGenerator

GENERATORS: dict[str, type[ArtGenerator]] = {
    "geometric": GeometricGenerator,
    "pointillism": PointillismGenerator,
    "mosaic": MosaicGenerator,
    "stained-glass": StainedGlassGenerator,
}

_ALIASES = {"stained_glass": "stained-glass"}


class UnknownArtStyleError(LookupError):
    """Raised when a style tag does not name a generator."""


def resolve_style(style: str) -> str:
    name = _ALIASES.get(style, style)
    if name not in GENERATORS:
        available = ", ".join(sorted(GENERATORS))
        raise UnknownArtStyleError(f"Unknown art style '{style}'. Available styles: {available}")
    return name


def create_generator(
    style: str,
    settings: ArtSettings | Mapping[str, Any] | None = None,
    rng: random.Random | None = None,
) -> ArtGenerator:
    """Build the generator for ``style``; plain mappings go through ``from_params``."""
    generator_class = GENERATORS[resolve_style(style)]
    if settings is not None and not isinstance(settings, ArtSettings):
        settings = generator_class.settings_class.from_params(settings)
    return generator_class(settings=settings, rng=rng)
