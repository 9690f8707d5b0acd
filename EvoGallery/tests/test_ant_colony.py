"""Tests for the ant colony grid, ant behaviour and plugin."""

from __future__ import annotations

import math
import random

import pytest

from core.vector import Vector
from simulations.ant_colony.agents import Ant
from simulations.ant_colony.behavior import (
    DELIVERED,
    PICKED_UP,
    ColonySettings,
    SensorReading,
    check_target,
    move,
    sense,
    steer,
    update_ant,
)
from simulations.ant_colony.environment import (
    ColonyEnvironment,
    ColonyStats,
    evaluate_path_efficiency,
    suggest_parameters,
)
from simulations.ant_colony.grid import FOOD, HOME, ColonyGrid
from simulations.ant_colony.sim import AntColonySimulation


def test_deposit_ramps_with_distance_and_caps() -> None:
    grid = ColonyGrid(size=100)
    grid.deposit(50.5, 50.5, FOOD, 1.0)
    assert grid.pheromone_at(50.5, 50.5, FOOD) == 0.0

    grid.deposit(80.5, 50.5, FOOD, 1.0)
    assert grid.pheromone_at(80.5, 50.5, FOOD) == pytest.approx(1.0)

    grid.deposit(80.5, 20.5, HOME, 1.0)
    assert grid.pheromone_at(80.5, 20.5, HOME) == pytest.approx(1.5)
    grid.deposit(80.5, 20.5, HOME, 1.0)
    assert grid.pheromone_at(80.5, 20.5, HOME) == pytest.approx(2.0)

    grid.deposit(60.5, 50.5, FOOD, 1.0)
    assert grid.pheromone_at(60.5, 50.5, FOOD) == pytest.approx(0.5)


def test_evaporation_strictly_decreases_and_never_goes_negative() -> None:
    grid = ColonyGrid(size=20)
    grid.deposit(2.5, 2.5, FOOD, 1.0)
    previous = grid.pheromone_at(2.5, 2.5, FOOD)
    assert previous > 0.0
    for _ in range(20):
        grid.evaporate(0.1)
        current = grid.pheromone_at(2.5, 2.5, FOOD)
        assert 0.0 <= current < previous
        previous = current
    assert grid.total_pheromone() == pytest.approx(previous)


def test_food_is_taken_one_unit_at_a_time() -> None:
    grid = ColonyGrid(size=20)
    assert grid.place_food(3, 4, 2)
    assert grid.take_food(3, 4)
    assert grid.has_food(3, 4)
    assert grid.take_food(3, 4)
    assert not grid.has_food(3, 4)
    assert not grid.take_food(3, 4)


def test_obstacles_clear_cells_and_refuse_the_nest() -> None:
    grid = ColonyGrid(size=100)
    grid.place_food(10, 10, 5)
    grid.deposit(10.5, 10.5, FOOD, 1.0)

    assert grid.toggle_obstacle(10, 10) is True
    assert grid.food[10, 10] == 0
    assert grid.pheromone_at(10.5, 10.5, FOOD) == 0.0
    assert not grid.place_food(10, 10, 5)
    assert grid.obstacle_cells() == [[10, 10]]

    assert grid.toggle_obstacle(10, 10) is False
    assert not grid.obstacle[10, 10]

    assert grid.toggle_obstacle(50, 50) is False
    assert not grid.obstacle[50, 50]
    assert not grid.place_food(50, 50, 5)


def test_outside_the_grid_counts_as_blocked() -> None:
    grid = ColonyGrid(size=100)
    assert grid.is_blocked(-0.1, 5.0)
    assert grid.is_blocked(100.0, 5.0)
    assert not grid.is_blocked(99.9, 5.0)
    assert grid.pheromone_at(-3.0, 5.0, HOME) == 0.0


def test_check_target_cases() -> None:
    grid = ColonyGrid(size=100)
    grid.place_food(10, 12, 3)
    assert check_target(False, Vector(10.4, 12.9), grid)
    assert not check_target(True, Vector(10.4, 12.9), grid)
    assert check_target(True, Vector(50.2, 50.7), grid)
    assert not check_target(False, Vector(50.2, 50.7), grid)
    assert not check_target(False, Vector(-1.0, 12.0), grid)


def test_ant_carrying_food_delivers_at_the_nest() -> None:
    grid = ColonyGrid(size=100)
    ant = Ant(ant_id=0, x=49.2, y=50.5, direction=0.0, has_food=True)

    event = update_ant(ant, grid, ColonySettings(), random.Random(3))

    assert event == DELIVERED
    assert not ant.has_food
    assert grid.cell_of(ant.x, ant.y) == (50, 50)


def test_foraging_ant_picks_up_food_in_front() -> None:
    grid = ColonyGrid(size=100)
    for row in (49, 50, 51):
        grid.place_food(51, row, 5)
    before = int(grid.food.sum())
    ant = Ant(ant_id=0, x=50.5, y=50.5, direction=0.0)

    event = update_ant(ant, grid, ColonySettings(), random.Random(8))

    assert event == PICKED_UP
    assert ant.has_food
    assert int(grid.food.sum()) == before - 1


def test_blocked_move_keeps_position() -> None:
    grid = ColonyGrid(size=100)
    ant = Ant(ant_id=0, x=0.5, y=50.5, direction=math.pi)
    assert move(ant, math.pi, grid, ColonySettings()) == Vector(0.5, 50.5)

    grid.place_obstacle(11, 50)
    walker = Ant(ant_id=1, x=10.5, y=50.5, direction=0.0)
    assert move(walker, 0.0, grid, ColonySettings()) == Vector(10.5, 50.5)


def test_sensors_facing_the_edge_report_obstacles_and_ant_turns_back() -> None:
    grid = ColonyGrid(size=100)
    settings = ColonySettings()
    ant = Ant(ant_id=0, x=1.5, y=50.5, direction=math.pi)

    readings = sense(ant, grid, settings)
    assert [reading.obstacle for reading in readings] == [True, True, True]
    assert [reading.angle for reading in readings] == [-settings.sensor_angle, 0.0, settings.sensor_angle]

    heading = steer(ant, readings, grid, settings, random.Random(1))
    assert abs(heading) < 0.6


def test_left_blocked_sensor_turns_the_ant_away() -> None:
    grid = ColonyGrid(size=100)
    settings = ColonySettings()
    ant = Ant(ant_id=0, x=30.5, y=30.5, direction=0.0)
    readings = (
        SensorReading(angle=-settings.sensor_angle, pheromone=0.0, obstacle=True),
        SensorReading(angle=0.0, pheromone=0.0, obstacle=False),
        SensorReading(angle=settings.sensor_angle, pheromone=0.0, obstacle=False),
    )
    for seed in range(5):
        heading = steer(ant, readings, grid, settings, random.Random(seed))
        assert heading > 0.9
        assert -math.pi <= heading < math.pi


def test_sensors_read_food_trail_ahead() -> None:
    grid = ColonyGrid(size=100)
    for x in range(75, 96):
        grid.deposit(x + 0.5, 50.5, FOOD, 1.0)
    ant = Ant(ant_id=0, x=70.5, y=50.5, direction=0.0)

    left, centre, right = sense(ant, grid, ColonySettings())
    assert centre.pheromone > 0.0
    assert centre.pheromone > left.pheromone
    assert centre.pheromone > right.pheromone
    assert not centre.obstacle


def test_path_records_only_after_min_step() -> None:
    ant = Ant(ant_id=0, x=0.0, y=0.0, direction=0.0)
    ant.record_position(1.0)
    ant.x = 0.5
    ant.record_position(1.0)
    assert len(ant.path) == 1
    ant.x = 1.5
    ant.record_position(1.0)
    assert len(ant.path) == 2
    assert ant.path_length() == pytest.approx(1.5)

    for step in range(40):
        ant.x = 3.0 * step
        ant.record_position(1.0)
    assert len(ant.path) == 20


def test_environment_step_lays_pheromone_and_reports_metrics() -> None:
    env = ColonyEnvironment(ColonySettings(number_of_ants=10), random.Random(4), size=60)
    env.reset()
    nest = env.grid.nest_center
    assert all(ant.position == nest for ant in env.ants)

    env.step()
    assert env.grid.total_pheromone() > 0.0
    metrics = env.get_metrics()
    assert set(metrics) == {
        "food_collected",
        "active_ants",
        "average_path_length",
        "total_pheromone_intensity",
        "food_delivered",
        "path_efficiency",
    }
    assert 0.0 <= metrics["path_efficiency"] <= 1.0
    assert len(env.get_render_state()["ants"]) == 10


def test_path_efficiency_scoring() -> None:
    efficient = ColonyStats(food_collected=5, active_ants=20, average_path_length=10.0, total_pheromone_intensity=60.0)
    assert evaluate_path_efficiency(efficient) == (pytest.approx(1.0), [])

    score, hints = evaluate_path_efficiency(
        ColonyStats(food_collected=0, active_ants=1, average_path_length=60.0, total_pheromone_intensity=10.0)
    )
    assert score == 0.0
    assert hints[0].startswith("Paths are very long")
    assert hints[1].startswith("Weak pheromone trails")

    score, hints = evaluate_path_efficiency(
        ColonyStats(food_collected=3, active_ants=2, average_path_length=40.0, total_pheromone_intensity=10.0)
    )
    assert score == pytest.approx(0.5)
    assert len(hints) == 2


def test_parameter_suggestions() -> None:
    sparse = ColonyStats(food_collected=0, active_ants=1, average_path_length=60.0, total_pheromone_intensity=10.0)
    assert suggest_parameters(sparse) == {"pheromone_strength": 1.5, "evaporation_rate": 0.01}

    saturated = ColonyStats(food_collected=5, active_ants=2, average_path_length=10.0, total_pheromone_intensity=200.0)
    assert suggest_parameters(saturated) == {
        "pheromone_strength": 0.8,
        "evaporation_rate": 0.05,
        "ant_speed": 1.5,
    }


def test_plugin_places_obstacles_before_food() -> None:
    sim = AntColonySimulation(
        params={"grid_size": 40, "number_of_ants": 5, "food": [[5, 5], [30, 30]], "obstacles": [[5, 5]]},
        rng=random.Random(0),
    )
    sim.reset()
    state = sim.get_render_state()
    assert state["nest"] == [20, 20]
    assert state["food"] == [{"x": 30, "y": 30, "amount": 100}]
    assert state["obstacles"] == [[5, 5]]

    sim.step()
    assert sim.get_metrics()["food_delivered"] == 0.0

    sim.clear()
    assert sim.get_render_state()["food"] == []
    assert sim.place_food(8, 9)
    assert sim.toggle_obstacle(1, 1)

    with pytest.raises(ValueError, match="food"):
        AntColonySimulation(params={"food": [[1, 2, 3]]}, rng=random.Random(0))


def test_out_of_band_settings_are_clamped_and_colony_still_steps() -> None:
    settings = ColonySettings(sensor_distance=0.0, evaporation_rate=-0.5, deposit_ramp=0.0, sensor_samples=0)
    assert settings.sensor_distance == 10.0
    assert settings.evaporation_rate == 0.001
    assert settings.deposit_ramp == 1.0
    assert settings.sensor_samples == 1

    env = ColonyEnvironment(settings, random.Random(2), size=40)
    env.reset()
    for _ in range(5):
        env.step()
    assert float(env.grid.food_pheromone.max()) <= settings.pheromone_cap
    assert float(env.grid.home_pheromone.max()) <= settings.pheromone_cap


def test_grid_keeps_pheromone_within_cap() -> None:
    grid = ColonyGrid(size=100, deposit_ramp=0.0)
    assert grid.deposit_ramp == 1.0
    grid.deposit(80.5, 50.5, FOOD, 1.0)
    for _ in range(5):
        grid.evaporate(-0.5)
    assert grid.pheromone_at(80.5, 50.5, FOOD) == pytest.approx(1.0)
    assert float(grid.food_pheromone.max()) <= grid.pheromone_cap


def test_uniform_trail_reads_its_raw_concentration() -> None:
    grid = ColonyGrid(size=100)
    grid.food_pheromone[:, :] = 0.8
    ant = Ant(ant_id=0, x=30.5, y=30.5, direction=0.0)

    for reading in sense(ant, grid, ColonySettings()):
        assert reading.pheromone == pytest.approx(0.8)
        assert not reading.obstacle
