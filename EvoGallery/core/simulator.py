"""Core simulator that orchestrates plugins without simulation-specific logic."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from core.analytics import RollingHistory, build_summary
from core.config_loader import load_config, validate_config
from core.deterministic_rng import DeterministicRNG
from core.plugin_registry import get_simulation_class

LOGGER = logging.getLogger(__name__)


class SimulatorRuntimeError(RuntimeError):
    """Raised when a simulation plugin fails during execution."""


class Simulator:
    """Plugin-driven simulator runtime.

    Accepts a YAML path or an already-parsed config mapping. One ``step`` is
    one plugin tick; the render snapshot is only rebuilt every
    ``run.render_every`` ticks.
    """

    def __init__(self, config: str | Path | Mapping[str, Any], strict: bool = True) -> None:
        if isinstance(config, Mapping):
            normalized = validate_config(config, strict=strict)
        else:
            normalized = load_config(config, strict=strict)
        self.config = normalized

        self.simulation_name = str(normalized["simulation"])
        self.simulation_config = dict(normalized["simulation_config"])
        self.run_config = dict(normalized["run_config"])
        self.logging_config = dict(normalized["logging_config"])

        self.seed = int(normalized["seed"])
        self.rng = DeterministicRNG(self.seed)
        self.step_index = 0
        self.history = RollingHistory(maxlen=int(self.run_config["history_length"]))
        self.render_every = int(self.run_config["render_every"])
        self.log_interval = max(1, int(self.logging_config["log_interval"]))
        self.last_render_state: dict[str, Any] | None = None
        self._started = False

        simulation_class = get_simulation_class(self.simulation_name)
        try:
            self.sim = simulation_class(
                params=self.simulation_config,
                rng=self.rng.stream(self.simulation_name),
            )
        except Exception as exc:
            raise SimulatorRuntimeError(
                f"Failed to initialize simulation plugin '{self.simulation_name}': {exc}"
            ) from exc

    def reset(self) -> None:
        """Reset plugin state, tick counter and metric history."""
        try:
            self.sim.reset()
        except Exception as exc:
            raise SimulatorRuntimeError(
                f"Simulation plugin '{self.simulation_name}' failed during reset: {exc}"
            ) from exc
        self.step_index = 0
        self.history.clear()
        self.last_render_state = self.sim.get_render_state()
        self._started = True
        LOGGER.info("Reset simulation '%s' (seed=%d).", self.simulation_name, self.seed)

    def step(self) -> dict[str, Any]:
        """Advance one tick and return ``{step, metrics, render_state}``.

        ``render_state`` is ``None`` on ticks skipped by ``render_every``.
        """
        if not self._started:
            self.reset()
        try:
            self.sim.step()
            metrics = self.sim.get_metrics()
        except Exception as exc:
            raise SimulatorRuntimeError(
                f"Simulation plugin '{self.simulation_name}' crashed at step {self.step_index + 1}: {exc}"
            ) from exc

        self.step_index += 1
        self.history.append(metrics)
        render_state = None
        if self.step_index % self.render_every == 0:
            render_state = self.sim.get_render_state()
            self.last_render_state = render_state

        if self.step_index % self.log_interval == 0:
            LOGGER.info(
                "%s step %d: %s",
                self.simulation_name,
                self.step_index,
                ", ".join(f"{key}={value:.4g}" for key, value in metrics.items()),
            )
        return {"step": self.step_index, "metrics": dict(metrics), "render_state": render_state}

    def run(self, steps: int | None = None) -> list[dict[str, float]]:
        """Reset, run ``steps`` ticks (default ``run.steps``) and collect metrics."""
        total = int(self.run_config["steps"] if steps is None else steps)
        if total < 0:
            raise SimulatorRuntimeError(f"Step count must be >= 0, got {total}.")
        metrics: list[dict[str, float]] = []
        self.reset()
        try:
            for _ in range(total):
                metrics.append(self.step()["metrics"])
        finally:
            self.close()
        LOGGER.info("Finished %d step(s) of '%s'.", total, self.simulation_name)
        return metrics

    def summary(self) -> dict[str, float]:
        return build_summary(self.history.rows())

    def close(self) -> None:
        try:
            self.sim.close()
        except Exception as exc:
            raise SimulatorRuntimeError(
                f"Simulation plugin '{self.simulation_name}' failed during close: {exc}"
            ) from exc
