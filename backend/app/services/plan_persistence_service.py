from __future__ import annotations

from typing import Any, Dict, Tuple

from crossframe.api import get_cached_plan, load_plan_bytes_to_cache, save_plan_bytes_from_cache

from ..exceptions import PlanCacheGoneError


def save_plan_service(plan_uid: str) -> Tuple[bytes, Dict[str, Any]]:
    if get_cached_plan(plan_uid) is None:
        raise PlanCacheGoneError(f"Treatment plan {plan_uid!r} is not cached (unknown or expired)")
    saved = save_plan_bytes_from_cache(plan_uid)
    return saved.content_bytes, {"sha256": saved.sha256, "size": saved.size}


def load_plan_service(payload: bytes) -> Dict[str, Any]:
    meta = load_plan_bytes_to_cache(payload)
    return {
        "plan_uid": str(meta["uid"]),
        "created_at": meta["created_at"].isoformat(),
        "outcome_column": meta.get("outcome_column"),
        "input_columns": list(meta.get("input_columns") or []),
        "derived_columns": list(meta.get("derived_columns") or []),
    }
