"""Command-line entry points for running and listing simulations."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

# Allow `python cli/main.py ...` execution from IDEs by adding repo root to sys.path.
if __package__ in {None, ""}:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from art.factory import GENERATORS
from core.config_loader import load_config
from core.plugin_registry import discover_simulations
from core.simulator import Simulator
from simulations.boids.presets import PRESETS
from simulations.game_of_life.patterns import SCENARIOS
from visualization.plotting import plot_history

LOGGER = logging.getLogger("cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run(args: argparse.Namespace) -> int:
    config = load_config(args.config, strict=not args.lenient)
    _configure_logging(args.log_level or config["logging_config"]["level"])

    simulator = Simulator(args.config, strict=not args.lenient)
    metrics = simulator.run(args.steps)

    if args.out:
        image = getattr(simulator.sim, "current_image", None)
        if image is None:
            LOGGER.warning("Simulation '%s' does not produce images; ignoring --out.", simulator.simulation_name)
        else:
            out = Path(args.out)
            out.parent.mkdir(parents=True, exist_ok=True)
            image().save(out)
            LOGGER.info("Wrote %s", out)

    if args.plot:
        if metrics:
            path = plot_history(simulator.history.rows(), args.plot, title=simulator.simulation_name)
            LOGGER.info("Wrote %s", path)
        else:
            LOGGER.warning("No steps were run; skipping --plot.")

    print(json.dumps(simulator.summary(), indent=2, sort_keys=True))
    return 0


def _list() -> int:
    print("simulations:")
    for name in sorted(discover_simulations()):
        print(f"  {name}")
    print("art styles:")
    for name in sorted(GENERATORS):
        print(f"  {name}")
    print("game_of_life scenarios:")
    for key, scenario in sorted(SCENARIOS.items()):
        print(f"  {key}: {scenario.description}")
    print("boids presets:")
    for key, preset in sorted(PRESETS.items()):
        print(f"  {key}: {preset.description}")
    return 0


def run_cli(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="evogallery")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="run a simulation from a YAML config")
    run_cmd.add_argument("--config", default="configs/boids.yaml")
    run_cmd.add_argument("--steps", type=int, default=None, help="override run.steps")
    run_cmd.add_argument("--out", default=None, help="save the final image (genetic_art only)")
    run_cmd.add_argument("--plot", default=None, help="save a metric history plot")
    run_cmd.add_argument("--log-level", default=None)
    run_cmd.add_argument("--lenient", action="store_true", help="warn instead of failing on unknown params")

    sub.add_parser("list", help="list simulations, art styles, scenarios and presets")

    args = parser.parse_args(argv)

    if args.command == "run":
        return _run(args)
    if args.command == "list":
        return _list()
    return 1


if __name__ == "__main__":
    raise SystemExit(run_cli())
