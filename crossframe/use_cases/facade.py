"""Public use-case entry points.

This module is the invocation surface for scripts and the backend. Concrete
implementations live in the sibling modules and are imported lazily.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

import pandas as pd

from crossframe.components.encoders.plan import TreatmentPlan
from crossframe.components.interfaces import VariableEncoder
from crossframe.contracts.choices import FoldMode
from crossframe.contracts.fold_configs import FoldModel
from crossframe.contracts.run_config import CrossFrameConfig
from crossframe.contracts.treatment_configs import TreatmentModel
from crossframe.core.progress import ProgressCallback
from crossframe.io.artifacts.store import ArtifactStore


def cross_frame_experiment(
    dataset: pd.DataFrame,
    cfg: CrossFrameConfig,
    *,
    encoder: Optional[VariableEncoder] = None,
    progress: Optional[ProgressCallback] = None,
):
    """Run the fold-wise assembler and return a :class:`CrossFrameResult`."""

    from crossframe.use_cases.crossframe import cross_frame_experiment as _run

    return _run(dataset, cfg, encoder=encoder, progress=progress)


def build_cross_frame(
    dataset: pd.DataFrame,
    input_columns: Sequence[str],
    outcome_column: str,
    fold_count: int = 5,
    seed: Optional[int] = None,
    *,
    fold_mode: FoldMode = "kfold",
    group_column: Optional[str] = None,
    treatment: Optional[TreatmentModel] = None,
    n_jobs: Optional[int] = 1,
    encoder: Optional[VariableEncoder] = None,
) -> Tuple[Any, pd.DataFrame]:
    """Return ``(treatment_plan, cross_frame)``.

    ``treatment_plan`` is fit on every row and is meant for future data;
    ``cross_frame`` is the training data transformed fold-wise, in the
    original row order, with the outcome column attached.
    """

    cfg = CrossFrameConfig(
        input_columns=list(input_columns),
        outcome_column=outcome_column,
        folds=FoldModel(mode=fold_mode, n_folds=fold_count, group_column=group_column),
        treatment=treatment if treatment is not None else TreatmentModel(),
        seed=seed,
        n_jobs=n_jobs,
    )
    result = cross_frame_experiment(dataset, cfg, encoder=encoder)
    return result.plan, result.cross_frame


def run_cross_frame_from_cfg(cfg: CrossFrameConfig, *, progress: Optional[ProgressCallback] = None):
    """Load ``cfg.data`` and run :func:`cross_frame_experiment` on it."""

    from crossframe.errors import ConfigurationError
    from crossframe.io.readers import load_from_data_model

    if cfg.data is None:
        raise ConfigurationError("cfg.data is required to run from a config")
    needed = [*cfg.input_columns, cfg.outcome_column]
    if cfg.folds.group_column:
        needed.append(cfg.folds.group_column)
    dataset = load_from_data_model(cfg.data, columns=needed)
    return cross_frame_experiment(dataset, cfg, progress=progress)


def design_treatments(
    dataset: pd.DataFrame,
    input_columns: Sequence[str],
    outcome_column: str,
    treatment: Optional[TreatmentModel] = None,
) -> TreatmentPlan:
    """Fit a plan on all rows (no cross frame)."""

    from crossframe.use_cases.treatments import design_treatments as _design

    return _design(dataset, input_columns, outcome_column, treatment)


def apply_treatments(plan: TreatmentPlan, dataset: pd.DataFrame) -> pd.DataFrame:
    """Transform new data with a fitted plan."""

    from crossframe.use_cases.treatments import apply_treatments as _apply

    return _apply(plan, dataset)


def save_plan(
    plan: TreatmentPlan,
    *,
    store: Optional[ArtifactStore] = None,
    uid: Optional[str] = None,
) -> Tuple[str, Dict[str, Any]]:
    from crossframe.use_cases.artifacts import save_plan as _save

    return _save(plan, store=store, uid=uid)


def load_plan(uid: str, *, store: Optional[ArtifactStore] = None) -> TreatmentPlan:
    from crossframe.use_cases.artifacts import load_plan as _load

    return _load(uid, store=store)


def cache_plan(plan: TreatmentPlan, *, uid: Optional[str] = None) -> str:
    """Keep ``plan`` in the process-local cache; return its uid."""

    from crossframe.use_cases.artifacts_cache import cache_plan as _cache

    return _cache(plan, uid=uid)


def get_cached_plan(uid: str) -> Optional[TreatmentPlan]:
    from crossframe.use_cases.artifacts_cache import get_cached_plan as _get

    return _get(uid)


def save_plan_bytes_from_cache(uid: str):
    from crossframe.use_cases.artifacts_cache import save_plan_bytes_from_cache as _save

    return _save(uid)


def load_plan_bytes_to_cache(file_bytes: bytes) -> Dict[str, Any]:
    from crossframe.use_cases.artifacts_cache import load_plan_bytes_to_cache as _load

    return _load(file_bytes)
