"""Per-style generator settings with range clamping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Mapping

from PIL import ImageColor

from art.primitives import SHAPE_KINDS
from core.pixels import Color
from core.schema_validator import clamp_fields

LOGGER = logging.getLogger(__name__)


def parse_color(value: Any) -> Color:
    """Accept ``#rrggbb``/CSS names or a 3/4 item sequence and return RGBA."""
    if isinstance(value, str):
        rgb = ImageColor.getrgb(value)
    else:
        rgb = tuple(int(channel) for channel in value)
    if len(rgb) not in (3, 4):
        raise ValueError(f"Color must have 3 or 4 channels, got {value!r}.")
    rgba = tuple(max(0, min(255, int(channel))) for channel in rgb) + (255,) * (4 - len(rgb))
    return rgba  # type: ignore[return-value]


@dataclass(frozen=True)
class ArtSettings:
    """Settings shared by every style.

    Numeric fields are clamped into ``BOUNDS`` on construction, whichever way
    the settings are built.
    """

    num_shapes: int = 500
    min_size: float = 10.0
    max_size: float = 50.0
    mutation_rate: float = 0.1
    resample_probability: float = 0.2
    position_jitter: float = 0.1

    BOUNDS: ClassVar[dict[str, tuple[float, float]]] = {
        "num_shapes": (10, 2000),
        "min_size": (1.0, 200.0),
        "max_size": (1.0, 200.0),
        "mutation_rate": (0.01, 0.5),
        "resample_probability": (0.0, 1.0),
        "position_jitter": (0.0, 1.0),
    }

    def __post_init__(self) -> None:
        clamp_fields(self, self.BOUNDS)
        if self.min_size > self.max_size:
            LOGGER.warning(
                "min_size %.2f exceeds max_size %.2f; using %.2f for both.",
                self.min_size,
                self.max_size,
                self.min_size,
            )
            object.__setattr__(self, "max_size", self.min_size)

    @classmethod
    def from_params(cls, params: Mapping[str, Any] | None = None) -> ArtSettings:
        """Build settings from a flat mapping; unknown keys are ignored."""
        params = dict(params or {})
        values = {item.name: cls._coerce(item.name, params[item.name]) for item in fields(cls) if item.name in params}
        return cls(**values)

    @classmethod
    def _coerce(cls, name: str, value: Any) -> Any:
        default = next(item.default for item in fields(cls) if item.name == name)
        if isinstance(default, bool):
            return bool(value)
        if isinstance(default, int):
            return int(value)
        if isinstance(default, float):
            return float(value)
        return value

    def to_dict(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


@dataclass(frozen=True)
class GeometricSettings(ArtSettings):
    num_shapes: int = 500
    min_size: float = 10.0
    max_size: float = 50.0
    resample_probability: float = 0.2
    shape_types: tuple[str, ...] = SHAPE_KINDS
    opacity_min: float = 0.1
    opacity_max: float = 0.9
    color_jitter: float = 20.0
    opacity_jitter: float = 0.1
    rotation_jitter: float = 0.5

    BOUNDS: ClassVar[dict[str, tuple[float, float]]] = {
        **ArtSettings.BOUNDS,
        "opacity_min": (0.1, 0.9),
        "opacity_max": (0.1, 0.9),
        "color_jitter": (0.0, 255.0),
        "opacity_jitter": (0.0, 1.0),
        "rotation_jitter": (0.0, 3.2),
    }

    def __post_init__(self) -> None:
        super().__post_init__()
        kinds = tuple(str(kind) for kind in self.shape_types) or SHAPE_KINDS
        unknown = [kind for kind in kinds if kind not in SHAPE_KINDS]
        if unknown:
            raise ValueError(f"Unknown shape type(s) {unknown}; expected any of {SHAPE_KINDS}.")
        object.__setattr__(self, "shape_types", kinds)

    @classmethod
    def _coerce(cls, name: str, value: Any) -> Any:
        if name == "shape_types":
            return tuple(value)
        return super()._coerce(name, value)


@dataclass(frozen=True)
class PointillismSettings(ArtSettings):
    num_shapes: int = 1000
    min_size: float = 2.0
    max_size: float = 10.0
    resample_probability: float = 0.3
    dot_alpha: float = 0.5

    BOUNDS: ClassVar[dict[str, tuple[float, float]]] = {
        **ArtSettings.BOUNDS,
        "num_shapes": (50, 10000),
        "dot_alpha": (0.0, 1.0),
    }


@dataclass(frozen=True)
class MosaicSettings(ArtSettings):
    num_shapes: int = 200
    min_size: float = 20.0
    max_size: float = 100.0
    resample_probability: float = 0.1
    color_jitter: float = 15.0
    grout_width: int = 1
    grout_color: tuple[int, ...] = (51, 51, 51, 255)

    BOUNDS: ClassVar[dict[str, tuple[float, float]]] = {
        **ArtSettings.BOUNDS,
        "num_shapes": (10, 5000),
        "color_jitter": (0.0, 255.0),
        "grout_width": (0, 10),
    }

    @classmethod
    def _coerce(cls, name: str, value: Any) -> Any:
        if name == "grout_color":
            return parse_color(value)
        return super()._coerce(name, value)


@dataclass(frozen=True)
class StainedGlassSettings(ArtSettings):
    num_shapes: int = 100
    min_size: float = 20.0
    max_size: float = 100.0
    resample_probability: float = 0.2
    panel_alpha: float = 0.9
    min_points: int = 5
    max_points: int = 7
    regenerate_probability: float = 0.3
    point_jitter: float = 5.0
    border_width: int = 2
    border_color: tuple[int, ...] = (26, 26, 26, 255)

    BOUNDS: ClassVar[dict[str, tuple[float, float]]] = {
        **ArtSettings.BOUNDS,
        "num_shapes": (10, 10000),
        "panel_alpha": (0.0, 1.0),
        "min_points": (3, 12),
        "max_points": (3, 12),
        "regenerate_probability": (0.0, 1.0),
        "point_jitter": (0.0, 50.0),
        "border_width": (0, 10),
    }

    @classmethod
    def _coerce(cls, name: str, value: Any) -> Any:
        if name == "border_color":
            return parse_color(value)
        return super()._coerce(name, value)
