"""Plot utilities for a run's metric history."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from core.analytics import observed_keys


def plot_history(
    history: Sequence[Mapping[str, float]],
    output_path: str | Path,
    keys: Sequence[str] | None = None,
    title: str | None = None,
) -> Path:
    """Render one stacked subplot per metric key and save it to ``output_path``."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    selected = list(keys) if keys else observed_keys(history)
    if not selected:
        raise ValueError("No metrics to plot.")

    steps = list(range(1, len(history) + 1))
    fig, axes = plt.subplots(len(selected), 1, figsize=(8, 2.2 * len(selected)), sharex=True, squeeze=False)
    for axis, key in zip(axes[:, 0], selected):
        axis.plot(steps, [float(row.get(key, 0.0)) for row in history], label=key)
        axis.set_ylabel(key)
        axis.legend(loc="upper left")
    axes[-1, 0].set_xlabel("step")
    if title:
        fig.suptitle(title)
    fig.tight_layout()
    fig.savefig(output)
    plt.close(fig)
    return output
