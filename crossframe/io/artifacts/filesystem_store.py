from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from crossframe.errors import PlanArtifactError

from .serialization import load_plan_artifact, sha256_hex
from .store import StoredArtifact

logger = logging.getLogger(__name__)

_UID_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


def default_artifacts_dir() -> Path:
    return Path(os.getenv("CROSSFRAME_ARTIFACTS_DIR", ".crossframe/artifacts"))


def _write_atomic(path: Path, data: bytes) -> None:
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


class FileSystemArtifactStore:
    """Treatment plans as files: ``<uid>.plan.joblib`` plus ``<uid>.plan.meta.json``.

    The JSON sidecar is written from the validated package meta, with the
    payload size and sha256 added; ``load`` refuses a payload whose digest no
    longer matches it.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir or default_artifacts_dir()).expanduser()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _paths(self, uid: str) -> Tuple[Path, Path]:
        if not _UID_RE.match(uid or ""):
            raise PlanArtifactError(f"Invalid plan uid: {uid!r}")
        return self.base_dir / f"{uid}.plan.joblib", self.base_dir / f"{uid}.plan.meta.json"

    def save(self, uid: str, payload: bytes) -> StoredArtifact:
        payload_path, meta_path = self._paths(uid)
        _, meta = load_plan_artifact(payload)
        if meta["uid"] != uid:
            raise PlanArtifactError(f"Payload belongs to plan {meta['uid']!r}, not {uid!r}")

        digest = sha256_hex(payload)
        sidecar: Dict[str, Any] = dict(meta)
        sidecar["created_at"] = meta["created_at"].isoformat()
        sidecar.update(size=len(payload), sha256=digest)

        _write_atomic(payload_path, payload)
        _write_atomic(meta_path, json.dumps(sidecar, ensure_ascii=False, indent=2).encode("utf-8"))
        logger.info("saved treatment plan %s to %s", uid, payload_path)
        return StoredArtifact(uid=uid, payload_path=str(payload_path), meta_path=str(meta_path), sha256=digest)

    def load(self, uid: str) -> Tuple[bytes, Dict[str, Any]]:
        payload_path, meta_path = self._paths(uid)
        if not payload_path.exists():
            raise FileNotFoundError(f"Plan payload not found for uid={uid}")

        payload = payload_path.read_bytes()
        meta: Dict[str, Any] = json.loads(meta_path.read_text(encoding="utf-8")) if meta_path.exists() else {}
        expected = meta.get("sha256")
        if expected is not None and expected != sha256_hex(payload):
            raise PlanArtifactError(f"Plan payload for uid={uid} does not match its recorded sha256")
        if "created_at" in meta:
            meta["created_at"] = datetime.fromisoformat(meta["created_at"])
        return payload, meta

    def exists(self, uid: str) -> bool:
        return self._paths(uid)[0].exists()
