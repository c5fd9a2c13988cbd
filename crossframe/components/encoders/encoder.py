from __future__ import annotations

"""Default variable encoder.

Numeric columns get ``clean``/``isBAD``; categorical columns get impact
coding (``catN`` or ``catB``), prevalence (``catP``) and level indicators
(``lev``). See :mod:`crossframe.components.encoders.treatments`.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

import numpy as np
import pandas as pd

from crossframe.contracts.treatment_configs import TreatmentModel
from crossframe.errors import ConfigurationError, DataError

from .levels import is_categorical
from .plan import Treatment, TreatmentPlan
from .treatments import CategoricalTreatment, NumericTreatment, fit_categorical, fit_numeric


def prepare_outcome(dataset: pd.DataFrame, outcome_column: str, cfg: TreatmentModel) -> np.ndarray:
    """Return the outcome as bool (binary) or float (numeric).

    Raises
    ------
    ConfigurationError
        Outcome column absent, or binary kind without ``outcome_target``.
    DataError
        Missing or non-numeric outcome values.
    """
    if outcome_column not in dataset.columns:
        raise ConfigurationError(f"Outcome column {outcome_column!r} not found in dataset")

    y = dataset[outcome_column]
    if y.isna().any():
        raise DataError(f"Outcome column {outcome_column!r} has {int(y.isna().sum())} missing value(s)")

    if cfg.outcome_kind == "binary":
        if cfg.outcome_target is None:
            raise ConfigurationError("Binary outcomes require treatment.outcome_target")
        return (y == cfg.outcome_target).to_numpy(dtype=bool)

    values = pd.to_numeric(y, errors="coerce").to_numpy(dtype=float, na_value=np.nan)
    if not np.all(np.isfinite(values)):
        raise DataError(f"Outcome column {outcome_column!r} must be numeric and finite")
    return values


def check_columns(dataset: pd.DataFrame, columns: Sequence[str]) -> None:
    """Raise :class:`DataError` for entirely missing or constant input columns."""
    for c in columns:
        series = dataset[c]
        if series.isna().all():
            raise DataError(f"Column {c!r} is entirely missing")
        if series.nunique(dropna=False) <= 1:
            raise DataError(f"Column {c!r} is constant ({series.iloc[0]!r} in every row)")


def check_derived_names(names: Sequence[str], outcome_column: str) -> None:
    """Raise :class:`ConfigurationError` when derived columns collide."""
    counts = Counter(names)
    dupes = sorted(n for n, c in counts.items() if c > 1)
    if dupes:
        raise ConfigurationError(f"Derived column name(s) produced more than once: {dupes}")
    if outcome_column in counts:
        raise ConfigurationError(f"Derived column {outcome_column!r} clashes with the outcome column")


@dataclass
class TreatmentEncoder:
    cfg: TreatmentModel = field(default_factory=TreatmentModel)

    def fit(
        self,
        dataset: pd.DataFrame,
        columns: Sequence[str],
        outcome_column: str,
        *,
        reference: Optional[TreatmentPlan] = None,
        validate: bool = True,
    ) -> TreatmentPlan:
        missing = [c for c in columns if c not in dataset.columns]
        if missing:
            raise ConfigurationError(f"Input column(s) not found in dataset: {missing}")

        y = prepare_outcome(dataset, outcome_column, self.cfg)
        if validate:
            if y.size == 0 or np.all(y == y[0]):
                raise DataError(f"Outcome column {outcome_column!r} has no variation")
            check_columns(dataset, columns)

        y_series = pd.Series(y.astype(float), index=dataset.index)
        codes = list(self.cfg.codes)

        treatments: Dict[str, Treatment] = {}
        for c in columns:
            ref = reference.treatments.get(c) if reference is not None else None
            # the reference layout decides the treatment family, so fold plans
            # match the full-data plan even when a fold sees only numbers
            categorical = (
                isinstance(ref, CategoricalTreatment) if ref is not None else is_categorical(dataset[c])
            )
            if categorical:
                treatments[c] = fit_categorical(
                    c,
                    dataset[c],
                    y_series,
                    outcome_kind=self.cfg.outcome_kind,
                    codes=codes,
                    rare_count=int(self.cfg.rare_count),
                    min_fraction=float(self.cfg.min_fraction),
                    smoothing=float(self.cfg.smoothing),
                    reference=ref,
                )
            else:
                treatments[c] = fit_numeric(
                    c,
                    dataset[c],
                    codes=codes,
                    reference=ref if isinstance(ref, NumericTreatment) else None,
                )

        plan = TreatmentPlan(
            outcome_column=outcome_column,
            outcome_kind=self.cfg.outcome_kind,
            outcome_target=self.cfg.outcome_target,
            treatments=treatments,
            n_rows=int(dataset.shape[0]),
            outcome_mean=float(np.mean(y)) if y.size else float("nan"),
            settings=self.cfg.model_dump(),
        )
        check_derived_names(plan.derived_columns, outcome_column)
        return plan

    def apply(self, model: TreatmentPlan, dataset: pd.DataFrame) -> pd.DataFrame:
        return model.transform(dataset)
