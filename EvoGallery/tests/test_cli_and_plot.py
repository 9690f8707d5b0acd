"""Tests for the CLI run/list flow and metric plotting."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from PIL import Image

from cli.main import run_cli
from visualization.plotting import plot_history


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_cli_run_prints_summary_and_plots(tmp_path, capsys) -> None:
    config = _write_config(
        tmp_path,
        "simulation: boids\n"
        "params:\n"
        "  number_of_boids: 15\n"
        "run:\n"
        "  steps: 5\n"
        "  random_seed: 2\n",
    )
    plot_path = tmp_path / "plots" / "boids.png"

    assert run_cli(["run", "--config", str(config), "--steps", "3", "--plot", str(plot_path)]) == 0

    summary = json.loads(capsys.readouterr().out)
    assert summary["samples"] == 3.0
    assert summary["boid_count"] == 15.0
    assert plot_path.exists()


def test_cli_saves_genetic_art_image(tmp_path, capsys) -> None:
    config = _write_config(
        tmp_path,
        "simulation: genetic_art\n"
        "params:\n"
        "  style: pointillism\n"
        "  width: 30\n"
        "  height: 20\n"
        "  num_shapes: 60\n"
        "run:\n"
        "  steps: 3\n"
        "  random_seed: 4\n",
    )
    out_path = tmp_path / "art.png"

    assert run_cli(["run", "--config", str(config), "--out", str(out_path)]) == 0

    with Image.open(out_path) as image:
        assert image.size == (30, 20)
    assert json.loads(capsys.readouterr().out)["generation"] == 3.0


def test_cli_list_names_plugins_styles_scenarios_and_presets(capsys) -> None:
    assert run_cli(["list"]) == 0
    out = capsys.readouterr().out
    for expected in ("game_of_life", "ant_colony", "stained-glass", "glider_gun", "tight"):
        assert expected in out


def test_plot_history_rejects_empty_history(tmp_path) -> None:
    with pytest.raises(ValueError, match="No metrics"):
        plot_history([], tmp_path / "empty.png")

    path = plot_history([{"x": 1.0}, {"x": 2.0, "y": 3.0}], tmp_path / "xy.png", keys=["y"], title="demo")
    assert path.exists()
