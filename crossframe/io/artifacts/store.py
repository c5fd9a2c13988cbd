from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol, Tuple


@dataclass(frozen=True)
class StoredArtifact:
    uid: str
    payload_path: str
    meta_path: str
    sha256: str


class ArtifactStore(Protocol):
    """Where saved treatment plans live.

    ``save`` receives a payload produced by
    :func:`crossframe.io.artifacts.serialization.save_plan_artifact` and must
    refuse anything else; ``load`` returns the payload and its JSON meta.
    """

    def save(self, uid: str, payload: bytes) -> StoredArtifact: ...

    def load(self, uid: str) -> Tuple[bytes, Dict[str, Any]]: ...

    def exists(self, uid: str) -> bool: ...
