"""Cache-aware plan helpers.

They coordinate the process-local plan cache with plan (de)serialization so
the backend never touches ``crossframe.runtime.*``.
"""

from __future__ import annotations

import uuid
from typing import Optional

from crossframe.components.encoders.plan import TreatmentPlan
from crossframe.errors import PlanArtifactError
from crossframe.io.artifacts.serialization import (
    PlanMetaDict,
    SaveResult,
    build_plan_meta,
    load_plan_artifact,
    save_plan_artifact,
)
from crossframe.runtime.caches.plan_cache import plan_cache


def cache_plan(plan: TreatmentPlan, *, uid: Optional[str] = None) -> str:
    uid = uid or uuid.uuid4().hex
    plan_cache.put(uid, plan, dict(build_plan_meta(plan, uid)))
    return uid


def get_cached_plan(uid: str) -> Optional[TreatmentPlan]:
    return plan_cache.get(uid)


def save_plan_bytes_from_cache(uid: str) -> SaveResult:
    """Serialize a cached plan under its uid, keeping its original meta."""
    entry = plan_cache.entry(uid)
    if entry is None:
        raise PlanArtifactError(
            f"Treatment plan {uid!r} is no longer available for saving (cache expired). "
            "Re-run the cross frame or load a saved plan."
        )
    meta = PlanMetaDict(**entry.meta) if entry.meta else build_plan_meta(entry.plan, uid)
    return save_plan_artifact(entry.plan, meta)


def load_plan_bytes_to_cache(file_bytes: bytes) -> PlanMetaDict:
    """Deserialize plan bytes and cache the plan under the uid in its meta."""
    plan, meta = load_plan_artifact(file_bytes)
    plan_cache.put(meta["uid"], plan, dict(meta))
    return meta
