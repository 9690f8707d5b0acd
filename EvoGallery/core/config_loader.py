"""Top-level config loading and validation for plugin-driven simulator."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from core.plugin_registry import SimulationPluginNotFoundError, get_schema_module
from core.schema_validator import SchemaValidationError, validate_simulation_params


class ConfigValidationError(ValueError):
    """Raised when runtime config fails validation."""


_REQUIRED_TOP_LEVEL = {"simulation", "params", "run"}
_OPTIONAL_TOP_LEVEL = {"logging"}
_REQUIRED_RUN = {
    "steps": int,
    "random_seed": int,
}
_OPTIONAL_RUN = {
    "history_length": int,
    "render_every": int,
}
_RUN_DEFAULTS = {
    "history_length": 50,
    "render_every": 1,
}
_OPTIONAL_LOGGING = {
    "level": str,
    "log_interval": int,
}
_LOGGING_DEFAULTS = {
    "level": "INFO",
    "log_interval": 100,
}


def _load_yaml_or_raise(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Failed to parse YAML config '{path}': {exc}") from exc

    if not isinstance(payload, Mapping):
        raise ConfigValidationError("Top-level config must be a mapping.")
    return dict(payload)


def _validate_section(
    section_name: str,
    section_value: Any,
    required_fields: Mapping[str, type[Any]],
    optional_fields: Mapping[str, type[Any]],
    defaults: Mapping[str, Any],
) -> dict[str, Any]:
    if not isinstance(section_value, Mapping):
        raise ConfigValidationError(f"Section '{section_name}' must be a mapping.")

    section = dict(defaults)
    section.update(section_value)
    missing = [key for key in required_fields if key not in section]
    if missing:
        raise ConfigValidationError(
            f"Section '{section_name}' missing required field(s): {missing}."
        )

    known = {**required_fields, **optional_fields}
    extras = [key for key in section if key not in known]
    if extras:
        raise ConfigValidationError(
            f"Section '{section_name}' has unknown field(s): {extras}."
        )

    for key, expected_type in known.items():
        if key in section and type(section[key]) is not expected_type:
            raise ConfigValidationError(
                f"Field '{section_name}.{key}' expected {expected_type.__name__}, got {type(section[key]).__name__}."
            )

    return section


def validate_config(config: Mapping[str, Any], strict: bool = True) -> dict[str, Any]:
    """Validate an already-parsed config mapping.

    Returns normalized config with keys:
    - simulation
    - simulation_config
    - run_config
    - logging_config
    - seed
    """
    missing_top = [key for key in _REQUIRED_TOP_LEVEL if key not in config]
    if missing_top:
        raise ConfigValidationError(
            f"Missing required top-level section(s): {sorted(missing_top)}."
        )

    extras_top = [key for key in config if key not in _REQUIRED_TOP_LEVEL | _OPTIONAL_TOP_LEVEL]
    if extras_top:
        raise ConfigValidationError(
            f"Unknown top-level field(s): {extras_top}."
        )

    simulation_name = config.get("simulation")
    if not isinstance(simulation_name, str) or not simulation_name:
        raise ConfigValidationError("Field 'simulation' must be a non-empty string.")

    try:
        schema_module = get_schema_module(simulation_name)
    except SimulationPluginNotFoundError as exc:
        raise ConfigValidationError(str(exc)) from exc
    except ImportError as exc:
        raise ConfigValidationError(
            f"Could not load schema for simulation '{simulation_name}'."
        ) from exc

    run_config = _validate_section("run", config["run"], _REQUIRED_RUN, _OPTIONAL_RUN, _RUN_DEFAULTS)
    if run_config["steps"] < 0:
        raise ConfigValidationError("Field 'run.steps' must be >= 0.")
    run_config["history_length"] = max(1, run_config["history_length"])
    run_config["render_every"] = max(1, run_config["render_every"])

    logging_config = _validate_section(
        "logging", config.get("logging", {}), {}, _OPTIONAL_LOGGING, _LOGGING_DEFAULTS
    )
    logging_config["level"] = str(logging_config["level"]).upper()

    raw_params = config["params"]
    if raw_params is None:
        raw_params = {}
    if not isinstance(raw_params, Mapping):
        raise ConfigValidationError("Section 'params' must be a mapping.")

    try:
        simulation_params = validate_simulation_params(
            params=dict(raw_params),
            schema_module=schema_module,
            simulation_name=simulation_name,
            strict=strict,
        )
    except SchemaValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc

    return {
        "simulation": simulation_name,
        "simulation_config": simulation_params,
        "run_config": run_config,
        "logging_config": logging_config,
        "seed": int(run_config["random_seed"]),
    }


def load_config(path: str | Path, strict: bool = True) -> dict[str, Any]:
    """Load and validate a YAML runtime configuration file."""
    return validate_config(_load_yaml_or_raise(Path(path)), strict=strict)
