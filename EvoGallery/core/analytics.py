"""Bounded metric history and summary statistics for a running engine."""

from __future__ import annotations

from collections import deque
from statistics import mean
from typing import Iterable, Mapping


class RollingHistory:
    """Keeps the last ``maxlen`` metric rows, oldest first."""

    def __init__(self, maxlen: int = 50) -> None:
        self.maxlen = max(1, int(maxlen))
        self._rows: deque[dict[str, float]] = deque(maxlen=self.maxlen)

    def append(self, row: Mapping[str, float]) -> None:
        self._rows.append({str(key): float(value) for key, value in row.items()})

    def clear(self) -> None:
        self._rows.clear()

    def rows(self) -> list[dict[str, float]]:
        return [dict(row) for row in self._rows]

    def series(self, key: str) -> list[float]:
        return [float(row.get(key, 0.0)) for row in self._rows]

    def __len__(self) -> int:
        return len(self._rows)


def observed_keys(history: Iterable[Mapping[str, float]]) -> list[str]:
    """Return every metric key seen in ``history`` in first-seen order."""
    keys: list[str] = []
    for row in history:
        for key in row:
            if key not in keys:
                keys.append(key)
    return keys


def build_summary(metrics_history: list[dict[str, float]]) -> dict[str, float]:
    """Aggregate a metric history into latest/mean/min/max/trend per key.

    An empty history yields an empty summary.
    """
    summary: dict[str, float] = {}
    if not metrics_history:
        return summary

    for key in observed_keys(metrics_history):
        values = [float(row[key]) for row in metrics_history if key in row]
        if not values:
            continue
        summary[key] = values[-1]
        summary[f"{key}_mean"] = float(mean(values))
        summary[f"{key}_min"] = float(min(values))
        summary[f"{key}_max"] = float(max(values))
        summary[f"{key}_trend"] = (values[-1] - values[0]) / max(len(values) - 1, 1)
    summary["samples"] = float(len(metrics_history))
    return summary
