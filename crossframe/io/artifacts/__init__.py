"""Treatment-plan persistence.

- serialization: joblib package format (bytes <-> plan + meta)
- store: ArtifactStore protocol
- filesystem_store: directory-backed store
"""

from .filesystem_store import FileSystemArtifactStore, default_artifacts_dir
from .serialization import PlanMetaDict, SaveResult, build_plan_meta, load_plan_artifact, save_plan_artifact
from .store import ArtifactStore, StoredArtifact

__all__ = [
    "ArtifactStore",
    "StoredArtifact",
    "FileSystemArtifactStore",
    "default_artifacts_dir",
    "SaveResult",
    "PlanMetaDict",
    "build_plan_meta",
    "save_plan_artifact",
    "load_plan_artifact",
]
