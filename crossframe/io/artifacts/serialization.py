"""Treatment-plan package format.

A saved plan is a joblib-dumped dict::

    {"__crossframe_plan__": True, "schema_version": "1", "meta": {...}, "plan": TreatmentPlan}

``meta`` repeats the plan's column layout so a payload can be inspected and
checked without trusting the pickled plan alone.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import datetime
from io import BytesIO
from typing import Any, Dict, List, Optional, Tuple, TypedDict, Union

import joblib

from crossframe import __version__
from crossframe.components.encoders.plan import TreatmentPlan
from crossframe.errors import PlanArtifactError

SCHEMA_VERSION = "1"
MAGIC_KEY = "__crossframe_plan__"


class PlanMetaDict(TypedDict, total=False):
    uid: str
    created_at: datetime
    crossframe_version: str
    outcome_column: str
    outcome_kind: str
    input_columns: List[str]
    derived_columns: List[str]
    n_rows: int
    payload_hash: str


@dataclass
class SaveResult:
    content_bytes: bytes
    size: int
    sha256: str


def sha256_hex(b: bytes) -> str:
    return hashlib.sha256(b).hexdigest()


def build_plan_meta(plan: TreatmentPlan, uid: str, *, created_at: Optional[datetime] = None) -> PlanMetaDict:
    return PlanMetaDict(
        uid=uid,
        created_at=created_at or datetime.now(),
        crossframe_version=__version__,
        outcome_column=plan.outcome_column,
        outcome_kind=plan.outcome_kind,
        input_columns=plan.input_columns,
        derived_columns=plan.derived_columns,
        n_rows=plan.n_rows,
    )


def _check_meta_against_plan(meta: Dict[str, Any], plan: Any) -> None:
    if not isinstance(plan, TreatmentPlan):
        raise PlanArtifactError(f"Expected a TreatmentPlan; got {type(plan).__name__}")
    if not meta.get("uid"):
        raise PlanArtifactError("Plan meta missing 'uid'")
    if not isinstance(meta.get("created_at"), datetime):
        raise PlanArtifactError("Plan meta 'created_at' must be a datetime")

    # the layout in meta must describe the pickled plan
    for key, actual in (
        ("outcome_column", plan.outcome_column),
        ("input_columns", plan.input_columns),
        ("derived_columns", plan.derived_columns),
    ):
        if meta.get(key) != actual:
            raise PlanArtifactError(f"Plan meta {key!r} does not match the plan: {meta.get(key)!r} != {actual!r}")


def save_plan_artifact(plan: TreatmentPlan, meta: PlanMetaDict) -> SaveResult:
    """Serialize ``plan`` with ``meta``; ``meta['payload_hash']`` is filled in."""
    _check_meta_against_plan(meta, plan)

    buf = BytesIO()
    joblib.dump(
        {MAGIC_KEY: True, "schema_version": SCHEMA_VERSION, "meta": dict(meta), "plan": plan},
        buf,
        compress=3,
    )
    data = buf.getvalue()
    digest = sha256_hex(data)
    meta["payload_hash"] = digest
    return SaveResult(content_bytes=data, size=len(data), sha256=digest)


def load_plan_artifact(payload: Union[bytes, BytesIO]) -> Tuple[TreatmentPlan, PlanMetaDict]:
    """Deserialize and check a plan package.

    Raises
    ------
    PlanArtifactError
        Not a plan package, another schema version, or meta inconsistent
        with the plan.
    """
    try:
        package = joblib.load(BytesIO(payload) if isinstance(payload, bytes) else payload)
    except Exception as exc:
        raise PlanArtifactError(f"Unreadable treatment-plan payload: {exc}") from exc

    if not isinstance(package, dict) or package.get(MAGIC_KEY) is not True:
        raise PlanArtifactError("Not a valid treatment-plan package")
    version = str(package.get("schema_version"))
    if version != SCHEMA_VERSION:
        raise PlanArtifactError(f"Incompatible schema_version: {version}, expected {SCHEMA_VERSION}")

    meta = package.get("meta")
    if not isinstance(meta, dict):
        raise PlanArtifactError("Corrupt artifact: missing 'meta'")
    plan = package.get("plan")
    if not isinstance(plan, TreatmentPlan):
        raise PlanArtifactError(f"Corrupt artifact: 'plan' is a {type(plan).__name__}")
    _check_meta_against_plan(meta, plan)
    return plan, PlanMetaDict(**meta)
