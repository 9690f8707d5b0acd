"""Tests for plugin discovery and the plugin contract."""

from __future__ import annotations

import json
import random

import pytest

from core.config_loader import validate_config
from core.plugin_registry import (
    SimulationPluginNotFoundError,
    discover_simulations,
    get_schema_module,
    get_simulation_class,
)
from simulations.base_simulation import Simulation

PLUGINS = ("ant_colony", "boids", "game_of_life", "genetic_art")


def test_discovery_finds_every_plugin() -> None:
    discovered = discover_simulations()
    for name in PLUGINS:
        assert name in discovered
        assert issubclass(discovered[name], Simulation)


def test_missing_plugin_raises_registry_error() -> None:
    with pytest.raises(SimulationPluginNotFoundError, match="Available simulations"):
        get_simulation_class("definitely_missing_sim")


def test_schema_modules_declare_defaults_for_optional_params() -> None:
    for name in PLUGINS:
        schema = get_schema_module(name)
        assert isinstance(schema.REQUIRED_PARAMS, dict)
        assert set(schema.DEFAULTS) <= set(schema.OPTIONAL_PARAMS)


@pytest.mark.parametrize("name", PLUGINS)
def test_plugin_contract(name: str) -> None:
    params = validate_config(
        {"simulation": name, "params": {}, "run": {"steps": 1, "random_seed": 0}}
    )["simulation_config"]
    if name == "genetic_art":
        params.update(width=24, height=24, num_shapes=20)
    if name == "game_of_life":
        params.update(rows=20, cols=20, random_region=10)

    sim = get_simulation_class(name)(params=params, rng=random.Random(0))
    sim.reset()
    sim.step()

    metrics = sim.get_metrics()
    assert metrics
    assert all(isinstance(value, float) for value in metrics.values())

    state = sim.get_render_state()
    assert state["simulation"] == name
    assert state["step"] == 1
    json.dumps(state)
    sim.close()
