# tests/conftest.py
from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from crossframe.contracts.fold_configs import FoldModel
from crossframe.contracts.run_config import CrossFrameConfig
from crossframe.contracts.treatment_configs import TreatmentModel
from crossframe.runtime.caches.plan_cache import plan_cache


@pytest.fixture(autouse=True)
def isolated_artifacts_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("CROSSFRAME_ARTIFACTS_DIR", str(tmp_path / "artifacts"))
    yield


@pytest.fixture(autouse=True)
def clear_plan_cache():
    plan_cache.clear()
    yield
    plan_cache.clear()


@pytest.fixture
def small_df() -> pd.DataFrame:
    """
    6 rows:
    - x_num: numeric with one missing value
    - x_cat: categorical with a missing value
    - y: numeric outcome
    """
    return pd.DataFrame(
        {
            "x_num": [1.0, 2.0, np.nan, 4.0, 5.0, 6.0],
            "x_cat": ["a", "a", "b", "b", "c", None],
            "y": [1.0, 3.0, 2.0, 4.0, 10.0, 0.0],
        }
    )


@pytest.fixture
def nine_rows() -> pd.DataFrame:
    """9 rows, non-default index, k=3 friendly."""
    return pd.DataFrame(
        {
            "x_num": [0.5, 1.5, 2.0, np.nan, 3.5, 4.0, 5.5, 6.0, 7.5],
            "x_cat": ["a", "b", "c", "a", "b", "c", "a", "b", "c"],
            "y": [1.0, 2.0, 0.0, 1.5, 3.0, 0.5, 2.5, 4.0, 1.0],
        },
        index=pd.Index([101, 102, 103, 104, 105, 106, 107, 108, 109], name="row_id"),
    )


@pytest.fixture
def medium_df() -> pd.DataFrame:
    rng = np.random.default_rng(7)
    n = 60
    x_num = rng.normal(size=n)
    x_cat = np.array(["red", "green", "blue", "grey"])[rng.integers(0, 4, size=n)]
    return pd.DataFrame(
        {
            "x_num": x_num,
            "x_cat": x_cat,
            "grp": np.repeat(np.arange(12), 5),
            "y": 2.0 * x_num + rng.normal(scale=0.5, size=n),
        }
    )


@pytest.fixture
def make_cfg():
    def _make(**overrides) -> CrossFrameConfig:
        folds = overrides.pop("folds", FoldModel(n_folds=3))
        treatment = overrides.pop("treatment", TreatmentModel())
        base = dict(
            input_columns=["x_num", "x_cat"],
            outcome_column="y",
            folds=folds,
            treatment=treatment,
            seed=11,
        )
        base.update(overrides)
        return CrossFrameConfig(**base)

    return _make
