"""Synthetic data for demonstrating impact-coding overfit.

The frame mixes:
- ``x_signal``: numeric, drives the outcome (with some missing values);
- ``x_weak``: low-cardinality categorical with a small real effect;
- ``x_noise``: high-cardinality categorical unrelated to the outcome;
- ``group``: a grouping column for grouped folds (not a model input);
- ``y``: binary outcome (bool), ``y_numeric``: the latent score.

Impact-coding ``x_noise`` on the same rows it is applied to makes it look
strongly predictive; the cross frame shows it is not.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from crossframe.runtime.random.rng import RngManager


def make_high_cardinality_frame(
    n_rows: int = 500,
    n_levels: int = 100,
    seed: int = 0,
    *,
    missing_fraction: float = 0.05,
    n_groups: int = 20,
) -> pd.DataFrame:
    rng = RngManager(seed).child_generator("extras/high_cardinality")

    x_signal = rng.normal(size=n_rows)
    weak_levels = np.array(["a", "b", "c"])
    x_weak = weak_levels[rng.integers(0, weak_levels.size, size=n_rows)]
    weak_effect = np.select([x_weak == "a", x_weak == "b"], [0.5, -0.5], default=0.0)
    x_noise = np.array([f"lev_{i:03d}" for i in rng.integers(0, n_levels, size=n_rows)])

    latent = x_signal + weak_effect + rng.normal(scale=1.0, size=n_rows)

    x_signal = x_signal.copy()
    x_signal[rng.random(n_rows) < missing_fraction] = np.nan

    return pd.DataFrame(
        {
            "x_signal": x_signal,
            "x_weak": x_weak,
            "x_noise": x_noise,
            "group": rng.integers(0, n_groups, size=n_rows),
            "y_numeric": latent,
            "y": latent > 0.0,
        }
    )
