"""Target image loading for the genetic_art plugin."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from art.settings import parse_color
from core.pixels import solid_buffer


class TargetImageError(ValueError):
    """Raised when a target image cannot be read."""


def load_target(path: str | Path, width: int, height: int) -> np.ndarray:
    """Decode an image file and resize it to ``width`` x ``height`` RGBA."""
    path = Path(path)
    if not path.exists():
        raise TargetImageError(f"Target image not found: {path}")
    try:
        with Image.open(path) as image:
            resized = image.convert("RGBA").resize((int(width), int(height)), Image.Resampling.LANCZOS)
    except (UnidentifiedImageError, OSError) as exc:
        raise TargetImageError(f"Could not read target image '{path}': {exc}") from exc
    return np.array(resized, dtype=np.uint8)


def solid_target(width: int, height: int, color: str | tuple[int, ...]) -> np.ndarray:
    return solid_buffer(width, height, parse_color(color))


def build_target(width: int, height: int, target_image: str = "", target_color: str = "#ff0000") -> np.ndarray:
    """Image file when ``target_image`` is set, otherwise a solid colour."""
    if target_image:
        return load_target(target_image, width, height)
    return solid_target(width, height, target_color)
