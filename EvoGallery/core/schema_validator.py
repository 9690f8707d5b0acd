"""Schema validation and range clamping for simulation plugin parameters."""

from __future__ import annotations

import logging
import warnings
from dataclasses import fields
from typing import Any, Mapping

LOGGER = logging.getLogger(__name__)


class SchemaValidationError(ValueError):
    """Raised when simulation params fail schema validation."""


def _type_name(tp: type[Any]) -> str:
    return tp.__name__


def _matches(value: Any, expected_type: type[Any]) -> bool:
    if expected_type is float:
        # YAML writes whole numbers without a dot; accept them for float fields.
        return type(value) in (float, int)
    return type(value) is expected_type


def clamp_value(name: str, value: Any, bounds: tuple[float, float] | None) -> Any:
    """Clamp a numeric ``value`` into ``bounds``, logging when it moves."""
    if bounds is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    low, high = bounds
    clamped = max(low, min(high, value))
    if isinstance(value, int):
        clamped = int(clamped)
    if clamped != value:
        LOGGER.warning("Parameter '%s'=%r outside [%s, %s]; clamped to %r.", name, value, low, high, clamped)
    return clamped


def clamp_params(params: Mapping[str, Any], bounds: Mapping[str, tuple[float, float]]) -> dict[str, Any]:
    """Return a copy of ``params`` with every bounded field clamped."""
    return {key: clamp_value(key, value, bounds.get(key)) for key, value in params.items()}


def clamp_fields(instance: Any, bounds: Mapping[str, tuple[float, float]]) -> None:
    """Clamp every bounded numeric field of a settings dataclass in place.

    Works on frozen dataclasses; int fields stay ints and float fields floats.
    """
    for item in fields(instance):
        bound = bounds.get(item.name)
        if bound is None or isinstance(item.default, bool):
            continue
        if isinstance(item.default, int):
            kind: type = int
        elif isinstance(item.default, float):
            kind = float
        else:
            continue
        value = clamp_value(item.name, kind(getattr(instance, item.name)), bound)
        object.__setattr__(instance, item.name, kind(value))


def validate_simulation_params(
    params: dict[str, Any],
    schema_module: Any,
    simulation_name: str,
    strict: bool = True,
) -> dict[str, Any]:
    """Validate simulation params against plugin schema.

    Applies defaults, validates required fields and types, clamps numeric
    fields into ``PARAM_BOUNDS`` and handles unknown parameters as warnings or
    errors depending on ``strict``.
    """
    required: Mapping[str, type[Any]] = getattr(schema_module, "REQUIRED_PARAMS", {})
    defaults: Mapping[str, Any] = getattr(schema_module, "DEFAULTS", {})
    optional: Mapping[str, type[Any]] = getattr(schema_module, "OPTIONAL_PARAMS", {})
    bounds: Mapping[str, tuple[float, float]] = getattr(schema_module, "PARAM_BOUNDS", {})

    if not isinstance(required, Mapping) or not isinstance(defaults, Mapping) or not isinstance(optional, Mapping):
        raise SchemaValidationError(
            f"Simulation '{simulation_name}' schema must define REQUIRED_PARAMS, DEFAULTS, OPTIONAL_PARAMS mappings."
        )

    merged = dict(defaults)
    merged.update(params)

    for key, expected_type in required.items():
        if key not in merged:
            raise SchemaValidationError(
                f"Simulation '{simulation_name}' missing required parameter '{key}'."
            )
        if not _matches(merged[key], expected_type):
            raise SchemaValidationError(
                f"Parameter '{key}' expected {_type_name(expected_type)}, got {type(merged[key]).__name__}."
            )

    for key, expected_type in optional.items():
        if key in merged and not _matches(merged[key], expected_type):
            raise SchemaValidationError(
                f"Parameter '{key}' expected {_type_name(expected_type)}, got {type(merged[key]).__name__}."
            )

    allowed = set(required) | set(optional) | set(defaults)
    extras = [key for key in merged if key not in allowed]
    if extras:
        message = (
            f"Unknown parameter(s) {extras} for simulation '{simulation_name}'."
        )
        if strict:
            raise SchemaValidationError(message)
        warnings.warn(message, stacklevel=2)

    return clamp_params(merged, bounds)
