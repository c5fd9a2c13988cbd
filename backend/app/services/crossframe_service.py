from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import pandas as pd

from crossframe.api import (
    CrossFrameConfig,
    apply_treatments,
    cache_plan,
    cross_frame_experiment,
    get_cached_plan,
)
from crossframe.contracts.results.crossframe import TreatedRecords

from ..exceptions import PlanCacheGoneError
from ..progress.callback import RegistryProgressCallback

logger = logging.getLogger(__name__)


def frame_to_records(frame: pd.DataFrame) -> TreatedRecords:
    """JSON-friendly records; missing values become None."""
    obj = frame.astype(object)
    obj = obj.where(frame.notna(), None)
    return TreatedRecords(
        columns=[str(c) for c in frame.columns],
        records=obj.to_dict(orient="records"),
    )


def run_cross_frame(
    records: List[Dict[str, Any]],
    cfg: CrossFrameConfig,
    *,
    progress_id: Optional[str] = None,
) -> Dict[str, Any]:
    dataset = pd.DataFrame.from_records(records)
    progress = RegistryProgressCallback(progress_id) if progress_id else None

    try:
        result = cross_frame_experiment(dataset, cfg, progress=progress)
    except Exception as e:
        if progress is not None:
            progress.fail(f"{type(e).__name__}: {e}")
        raise

    uid = cache_plan(result.plan)
    logger.info("cached treatment plan %s (%d derived columns)", uid, len(result.derived_columns))

    return {
        "summary": result.summary(plan_uid=uid),
        "cross_frame": frame_to_records(result.cross_frame),
    }


def apply_cached_plan(plan_uid: str, records: List[Dict[str, Any]]) -> Dict[str, Any]:
    plan = get_cached_plan(plan_uid)
    if plan is None:
        raise PlanCacheGoneError(f"Treatment plan {plan_uid!r} is not cached (unknown or expired)")

    dataset = pd.DataFrame.from_records(records)
    treated = apply_treatments(plan, dataset)
    return {"plan_uid": plan_uid, "treated": frame_to_records(treated)}
