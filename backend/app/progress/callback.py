from __future__ import annotations

"""Adapter from the engine's :class:`crossframe.api.ProgressCallback` to the
backend :data:`~backend.app.progress.registry.PROGRESS` board.
"""

from dataclasses import dataclass
from typing import Optional

from .registry import PROGRESS


@dataclass(frozen=True)
class RegistryProgressCallback:
    progress_id: str

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        PROGRESS.start(self.progress_id, n_folds=total, label=label)

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        PROGRESS.fold_done(self.progress_id, folds_done=current, label=label)

    def finalize(self, *, label: Optional[str] = None) -> None:
        PROGRESS.finish(self.progress_id, label=label)

    def fail(self, message: str) -> None:
        PROGRESS.fail(self.progress_id, message)
