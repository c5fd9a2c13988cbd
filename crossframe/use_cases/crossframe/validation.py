from __future__ import annotations

import pandas as pd

from crossframe.contracts.run_config import CrossFrameConfig
from crossframe.errors import ConfigurationError


def validate_request(dataset: pd.DataFrame, cfg: CrossFrameConfig) -> None:
    """Check the configuration against the dataset before any fold work starts."""

    if not isinstance(dataset, pd.DataFrame):
        raise ConfigurationError(f"dataset must be a pandas DataFrame; got {type(dataset).__name__}")

    k = int(cfg.folds.n_folds)
    if k < 2:
        raise ConfigurationError(f"fold count must be at least 2; got {k}")

    n_rows = int(dataset.shape[0])
    if n_rows < k:
        raise ConfigurationError(f"cannot split {n_rows} rows into {k} folds")

    if cfg.outcome_column not in dataset.columns:
        raise ConfigurationError(f"Outcome column {cfg.outcome_column!r} not found in dataset")

    if not cfg.input_columns:
        raise ConfigurationError("At least one input column is required")

    missing = [c for c in cfg.input_columns if c not in dataset.columns]
    if missing:
        raise ConfigurationError(f"Input column(s) not found in dataset: {missing}")

    if len(set(cfg.input_columns)) != len(cfg.input_columns):
        raise ConfigurationError("Input columns must be unique")

    if cfg.outcome_column in cfg.input_columns:
        raise ConfigurationError(f"Outcome column {cfg.outcome_column!r} cannot be an input")

    group = cfg.folds.group_column
    if cfg.folds.mode == "grouped":
        if not group:
            raise ConfigurationError("fold mode 'grouped' requires folds.group_column")
        if group not in dataset.columns:
            raise ConfigurationError(f"Group column {group!r} not found in dataset")
    if group and group in cfg.input_columns:
        raise ConfigurationError(f"Group column {group!r} is for splitting only and cannot be an input")

    if cfg.treatment.outcome_kind == "binary" and cfg.treatment.outcome_target is None:
        raise ConfigurationError("Binary outcomes require treatment.outcome_target")

    if cfg.n_jobs is not None and int(cfg.n_jobs) == 0:
        raise ConfigurationError("n_jobs must be non-zero (use 1 for sequential folds)")
