"""Dynamic simulation plugin discovery and lookup."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from types import ModuleType
from typing import Type

from simulations.base_simulation import Simulation
import simulations

LOGGER = logging.getLogger(__name__)

_DISCOVERED: dict[str, Type[Simulation]] | None = None


class SimulationPluginNotFoundError(LookupError):
    """Raised when requested simulation plugin cannot be resolved."""


def _import_plugin_module(package_name: str) -> ModuleType | None:
    for module_name in (f"simulations.{package_name}", f"simulations.{package_name}.sim"):
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            LOGGER.debug("Skipping %s: %s", module_name, exc)
            continue
        if hasattr(module, "SIMULATION_NAME"):
            return module
    return None


def discover_simulations() -> dict[str, Type[Simulation]]:
    """Discover simulation plugins from the ``simulations`` package."""
    global _DISCOVERED
    if _DISCOVERED is not None:
        return dict(_DISCOVERED)

    discovered: dict[str, Type[Simulation]] = {}
    for module_info in pkgutil.iter_modules(simulations.__path__):
        if not module_info.ispkg or module_info.name.startswith("_"):
            continue

        plugin_module = _import_plugin_module(module_info.name)
        if plugin_module is None:
            continue

        sim_name = getattr(plugin_module, "SIMULATION_NAME", None)
        sim_class = getattr(plugin_module, "SimulationClass", None)
        if isinstance(sim_name, str) and isinstance(sim_class, type) and issubclass(sim_class, Simulation):
            discovered[sim_name] = sim_class

    LOGGER.debug("Discovered simulations: %s", sorted(discovered))
    _DISCOVERED = discovered
    return dict(discovered)


def get_simulation_class(name: str) -> Type[Simulation]:
    """Return simulation class by name or raise descriptive error."""
    discovered = discover_simulations()
    if name in discovered:
        return discovered[name]

    available = ", ".join(sorted(discovered.keys())) or "<none>"
    raise SimulationPluginNotFoundError(
        f"Simulation plugin '{name}' not found. Available simulations: {available}"
    )


def get_schema_module(name: str) -> ModuleType:
    """Import the ``config_schema`` module that belongs to plugin ``name``."""
    get_simulation_class(name)
    return importlib.import_module(f"simulations.{name}.config_schema")
