from __future__ import annotations

"""In-process board of cross-frame fold progress, polled via ``/progress``.

Finished runs are kept until the board holds more than ``max_finished`` of
them; the oldest finished records are dropped first.
"""

import time
from threading import Lock
from typing import Dict, Optional

from pydantic import BaseModel, Field, computed_field


class FoldProgressRecord(BaseModel):
    progress_id: str
    n_folds: int = 0
    folds_done: int = 0
    label: str = "queued"
    done: bool = False
    error: Optional[str] = None
    updated_at: float = Field(default_factory=time.time)

    @computed_field
    @property
    def percent(self) -> float:
        if self.done:
            return 100.0
        return 100.0 * min(self.folds_done, self.n_folds) / max(1, self.n_folds)


class ProgressBoard:
    def __init__(self, *, max_finished: int = 256) -> None:
        self.max_finished = max_finished
        self._records: Dict[str, FoldProgressRecord] = {}
        self._lock = Lock()

    def _set(self, pid: str, **changes) -> None:
        with self._lock:
            rec = self._records.get(pid) or FoldProgressRecord(progress_id=pid)
            self._records[pid] = rec.model_copy(update={**changes, "updated_at": time.time()})
            if changes.get("done"):
                self._prune()

    def _prune(self) -> None:
        finished = sorted((r.updated_at, pid) for pid, r in self._records.items() if r.done)
        for _, pid in finished[: max(0, len(finished) - self.max_finished)]:
            del self._records[pid]

    def start(self, pid: str, n_folds: int, label: Optional[str] = None) -> None:
        self._set(pid, n_folds=int(n_folds), folds_done=0, label=label or "cross-frame folds", done=False, error=None)

    def fold_done(self, pid: str, folds_done: int, label: Optional[str] = None) -> None:
        changes = {"folds_done": int(folds_done)}
        if label is not None:
            changes["label"] = label
        self._set(pid, **changes)

    def finish(self, pid: str, label: Optional[str] = None) -> None:
        with self._lock:
            rec = self._records.get(pid)
            n_folds = rec.n_folds if rec is not None else 0
        self._set(pid, folds_done=n_folds, label=label or "done", done=True)

    def fail(self, pid: str, message: str) -> None:
        self._set(pid, label="failed", done=True, error=message)

    def get(self, pid: str) -> Optional[FoldProgressRecord]:
        with self._lock:
            return self._records.get(pid)


PROGRESS = ProgressBoard()
