from __future__ import annotations

import pytest

from core.analytics import RollingHistory, build_summary, observed_keys


def test_rolling_history_keeps_newest_rows() -> None:
    history = RollingHistory(maxlen=2)
    history.append({"a": 1})
    history.append({"a": 2, "b": 5})
    history.append({"a": 3})

    assert len(history) == 2
    assert history.rows() == [{"a": 2.0, "b": 5.0}, {"a": 3.0}]
    assert history.series("b") == [5.0, 0.0]

    history.clear()
    assert history.rows() == []


def test_rolling_history_needs_room_for_one_row() -> None:
    assert RollingHistory(maxlen=0).maxlen == 1


def test_observed_keys_keep_first_seen_order() -> None:
    assert observed_keys([{"b": 1.0}, {"a": 1.0, "b": 2.0}, {"c": 0.0}]) == ["b", "a", "c"]


def test_build_summary() -> None:
    assert build_summary([]) == {}

    summary = build_summary([{"fitness": 0.2}, {"fitness": 0.4}, {"fitness": 0.9, "extra": 1.0}])
    assert summary["fitness"] == 0.9
    assert summary["fitness_mean"] == pytest.approx(0.5)
    assert summary["fitness_min"] == 0.2
    assert summary["fitness_max"] == 0.9
    assert summary["fitness_trend"] == pytest.approx(0.35)
    assert summary["extra"] == 1.0
    assert summary["extra_trend"] == 0.0
    assert summary["samples"] == 3.0
