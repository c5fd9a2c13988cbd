from __future__ import annotations

"""Level and value normalization shared by the treatments."""

import numpy as np
import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype

NA_LEVEL = "_NA_"
RARE_LEVEL = "_rare_"


def is_categorical(series: pd.Series) -> bool:
    """Object, string, category and bool columns are treated as categorical."""
    return is_bool_dtype(series.dtype) or not is_numeric_dtype(series.dtype)


def level_values(series: pd.Series) -> pd.Series:
    """Return levels as strings; missing values become ``_NA_``."""
    missing = series.isna()
    levels = series.astype(object).map(str)
    return levels.mask(missing, NA_LEVEL)


def numeric_values(series: pd.Series) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(values, bad)`` where ``bad`` flags missing/non-finite entries."""
    values = pd.to_numeric(series, errors="coerce").to_numpy(dtype=float, na_value=np.nan)
    bad = ~np.isfinite(values)
    return values, bad
