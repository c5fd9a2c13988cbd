from __future__ import annotations

"""Plan persistence helpers (store-backed).

``store`` defaults to a :class:`FileSystemArtifactStore` rooted at
``CROSSFRAME_ARTIFACTS_DIR``.
"""

import logging
import uuid
from typing import Optional, Tuple

from crossframe.components.encoders.plan import TreatmentPlan
from crossframe.errors import PlanArtifactError
from crossframe.io.artifacts.filesystem_store import FileSystemArtifactStore
from crossframe.io.artifacts.serialization import PlanMetaDict, build_plan_meta, load_plan_artifact, save_plan_artifact
from crossframe.io.artifacts.store import ArtifactStore

logger = logging.getLogger(__name__)


def _store(store: Optional[ArtifactStore]) -> ArtifactStore:
    return store if store is not None else FileSystemArtifactStore()


def save_plan(
    plan: TreatmentPlan,
    *,
    store: Optional[ArtifactStore] = None,
    uid: Optional[str] = None,
) -> Tuple[str, PlanMetaDict]:
    """Persist ``plan``; return ``(uid, meta)``."""
    uid = uid or uuid.uuid4().hex
    meta = build_plan_meta(plan, uid)
    saved = save_plan_artifact(plan, meta)
    stored = _store(store).save(uid, saved.content_bytes)
    logger.debug("plan %s stored at %s", uid, stored.payload_path)
    return uid, meta


def load_plan(uid: str, *, store: Optional[ArtifactStore] = None) -> TreatmentPlan:
    payload, _ = _store(store).load(uid)
    plan, meta = load_plan_artifact(payload)
    if meta["uid"] != uid:
        raise PlanArtifactError(f"Stored payload for {uid!r} belongs to plan {meta['uid']!r}")
    return plan
