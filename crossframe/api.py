"""Public Engine API.

This module is the **stable public surface** for invoking use-cases.

Prefer importing from here instead of reaching into internal subpackages:

    from crossframe.api import build_cross_frame, apply_treatments

The backend and scripts may depend on this module.
"""

from __future__ import annotations

from crossframe.use_cases.facade import (
    apply_treatments,
    build_cross_frame,
    cache_plan,
    cross_frame_experiment,
    design_treatments,
    get_cached_plan,
    load_plan,
    load_plan_bytes_to_cache,
    run_cross_frame_from_cfg,
    save_plan,
    save_plan_bytes_from_cache,
)

from crossframe import __version__
from crossframe.components.encoders.plan import TreatmentPlan
from crossframe.contracts.run_config import CrossFrameConfig, DataModel
from crossframe.contracts.fold_configs import FoldModel
from crossframe.contracts.treatment_configs import TreatmentModel
from crossframe.core.progress import ProgressCallback
from crossframe.errors import (
    ConfigurationError,
    CrossFrameError,
    DataError,
    FoldError,
    PlanArtifactError,
)
from crossframe.registries.splitters import list_fold_modes
from crossframe.use_cases.crossframe.types import CrossFrameResult

__all__ = [
    "build_cross_frame",
    "cross_frame_experiment",
    "run_cross_frame_from_cfg",
    "design_treatments",
    "apply_treatments",
    "save_plan",
    "load_plan",
    "cache_plan",
    "get_cached_plan",
    "save_plan_bytes_from_cache",
    "load_plan_bytes_to_cache",
    "TreatmentPlan",
    "CrossFrameResult",
    "CrossFrameConfig",
    "DataModel",
    "FoldModel",
    "TreatmentModel",
    "ProgressCallback",
    "CrossFrameError",
    "ConfigurationError",
    "DataError",
    "FoldError",
    "PlanArtifactError",
    "list_fold_modes",
    "__version__",
]
