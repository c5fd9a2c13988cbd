from __future__ import annotations

"""Per-variable treatments.

A treatment is fit on one set of rows and applied to any frame holding the
same input column. Derived columns are named ``<variable>_<code>``.
"""

import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy.special import logit

from .levels import RARE_LEVEL, level_values, numeric_values

# Probability clamp for catB logits
_EPS = 1e-6


@dataclass
class NumericTreatment:
    variable: str
    mean: float
    emit_clean: bool = True
    emit_isbad: bool = False

    def derived(self) -> List[Tuple[str, str]]:
        out: List[Tuple[str, str]] = []
        if self.emit_clean:
            out.append((f"{self.variable}_clean", "clean"))
        if self.emit_isbad:
            out.append((f"{self.variable}_isBAD", "isBAD"))
        return out

    def transform(self, series: pd.Series) -> Dict[str, np.ndarray]:
        values, bad = numeric_values(series)
        out: Dict[str, np.ndarray] = {}
        if self.emit_clean:
            out[f"{self.variable}_clean"] = np.where(bad, self.mean, values)
        if self.emit_isbad:
            out[f"{self.variable}_isBAD"] = bad.astype(float)
        return out


def fit_numeric(
    variable: str,
    series: pd.Series,
    *,
    codes: Sequence[str],
    reference: Optional[NumericTreatment] = None,
) -> NumericTreatment:
    values, bad = numeric_values(series)
    good = values[~bad]
    mean = float(np.mean(good)) if good.size else 0.0

    if reference is not None:
        return NumericTreatment(
            variable=variable,
            mean=mean,
            emit_clean=reference.emit_clean,
            emit_isbad=reference.emit_isbad,
        )
    return NumericTreatment(
        variable=variable,
        mean=mean,
        emit_clean="clean" in codes,
        emit_isbad=("isBAD" in codes) and bool(bad.any()),
    )


@dataclass
class CategoricalTreatment:
    variable: str
    # "catN" (numeric outcome), "catB" (binary outcome) or None
    impact_code: Optional[str]
    impact: Dict[str, float] = field(default_factory=dict)
    emit_prevalence: bool = False
    prevalence: Dict[str, float] = field(default_factory=dict)
    # Levels pooled into RARE_LEVEL at fit time
    rare_levels: frozenset = frozenset()
    indicator_levels: Tuple[str, ...] = ()

    def derived(self) -> List[Tuple[str, str]]:
        out: List[Tuple[str, str]] = []
        if self.impact_code is not None:
            out.append((f"{self.variable}_{self.impact_code}", self.impact_code))
        if self.emit_prevalence:
            out.append((f"{self.variable}_catP", "catP"))
        for level in self.indicator_levels:
            out.append((f"{self.variable}_lev_{level}", "lev"))
        return out

    def pooled_levels(self, series: pd.Series) -> pd.Series:
        levels = level_values(series)
        if self.rare_levels:
            levels = levels.mask(levels.isin(self.rare_levels), RARE_LEVEL)
        return levels

    def transform(self, series: pd.Series) -> Dict[str, np.ndarray]:
        levels = self.pooled_levels(series)
        out: Dict[str, np.ndarray] = {}
        # novel levels map to 0 impact, 0 prevalence, no indicator
        if self.impact_code is not None:
            out[f"{self.variable}_{self.impact_code}"] = (
                levels.map(self.impact).fillna(0.0).to_numpy(dtype=float)
            )
        if self.emit_prevalence:
            out[f"{self.variable}_catP"] = (
                levels.map(self.prevalence).fillna(0.0).to_numpy(dtype=float)
            )
        for level in self.indicator_levels:
            out[f"{self.variable}_lev_{level}"] = (levels == level).to_numpy(dtype=float)
        return out


def _impact_numeric(y: pd.Series, levels: pd.Series, smoothing: float) -> Dict[str, float]:
    grand = float(y.mean())
    grouped = y.groupby(levels.to_numpy(), sort=True)
    sums = grouped.sum()
    counts = grouped.count()
    shrunk = (sums + smoothing * grand) / (counts + smoothing)
    return {str(k): float(v - grand) for k, v in shrunk.items()}


def _impact_binary(y: pd.Series, levels: pd.Series, smoothing: float) -> Dict[str, float]:
    rate = float(y.mean())
    grouped = y.groupby(levels.to_numpy(), sort=True)
    pos = grouped.sum()
    counts = grouped.count()
    level_rate = (pos + smoothing * rate) / (counts + smoothing)
    base = float(logit(np.clip(rate, _EPS, 1.0 - _EPS)))
    lifted = logit(np.clip(level_rate.to_numpy(dtype=float), _EPS, 1.0 - _EPS))
    return {str(k): float(v - base) for k, v in zip(level_rate.index, lifted)}


def fit_categorical(
    variable: str,
    series: pd.Series,
    y: pd.Series,
    *,
    outcome_kind: str,
    codes: Sequence[str],
    rare_count: int = 0,
    min_fraction: float = 0.02,
    smoothing: float = 1.0,
    reference: Optional[CategoricalTreatment] = None,
) -> CategoricalTreatment:
    """Fit impact, prevalence and indicator coding for one categorical column.

    ``y`` is the prepared outcome (float; 0/1 for binary outcomes) aligned
    with ``series``. With ``reference`` the derived-column layout is copied
    from it and only the statistics come from these rows.
    """
    raw = level_values(series)
    if reference is not None:
        # pooling is part of the layout: fold fits reuse the full-data rare set
        rare = reference.rare_levels
    elif rare_count > 0:
        rare = frozenset(str(k) for k, v in raw.value_counts().items() if v < rare_count)
    else:
        rare = frozenset()
    levels = raw.mask(raw.isin(rare), RARE_LEVEL) if rare else raw

    n = max(int(levels.shape[0]), 1)
    prevalence = {str(k): float(v) / n for k, v in levels.value_counts().items()}

    if reference is not None:
        impact_code = reference.impact_code
        emit_prevalence = reference.emit_prevalence
        indicator_levels = reference.indicator_levels
    else:
        wanted = "catB" if outcome_kind == "binary" else "catN"
        impact_code = wanted if wanted in codes else None
        emit_prevalence = "catP" in codes
        if "lev" in codes:
            indicator_levels = tuple(sorted(k for k, v in prevalence.items() if v >= min_fraction))
        else:
            indicator_levels = ()

    impact: Dict[str, float] = {}
    if impact_code is not None:
        y = pd.Series(np.asarray(y, dtype=float), index=levels.index)
        if float(y.max() - y.min()) == 0.0:
            warnings.warn(
                f"Outcome has no variation in the rows used to fit '{variable}'; "
                f"{impact_code} impact coding is 0 for every level.",
                RuntimeWarning,
                stacklevel=2,
            )
            impact = {k: 0.0 for k in prevalence}
        elif impact_code == "catB":
            impact = _impact_binary(y, levels, smoothing)
        else:
            impact = _impact_numeric(y, levels, smoothing)

    return CategoricalTreatment(
        variable=variable,
        impact_code=impact_code,
        impact=impact,
        emit_prevalence=emit_prevalence,
        prevalence=prevalence,
        rare_levels=rare,
        indicator_levels=tuple(indicator_levels),
    )
