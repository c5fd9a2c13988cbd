from __future__ import annotations

"""Progress reporting for the fold loop.

The engine runs without any backend or UI. Callers may pass any object with
``init``/``update``/``finalize``; the fold loop reports through
:class:`FoldProgress`, which also accepts ``None``.
"""

from dataclasses import dataclass
from typing import Optional, Protocol


class ProgressCallback(Protocol):
    def init(self, *, total: int, label: Optional[str] = None) -> None: ...

    def update(self, *, current: int, label: Optional[str] = None) -> None: ...

    def finalize(self, *, label: Optional[str] = None) -> None: ...


@dataclass
class FoldProgress:
    """Report one step per finished fold, in completion order."""

    callback: Optional[ProgressCallback]
    n_folds: int
    label: str = "cross-frame folds"
    done: int = 0

    def start(self) -> None:
        if self.callback is not None:
            self.callback.init(total=self.n_folds, label=self.label)

    def fold_done(self, fold_id: int) -> None:
        self.done += 1
        if self.callback is not None:
            self.callback.update(current=self.done, label=f"fold {fold_id} ({self.done}/{self.n_folds})")

    def finish(self) -> None:
        if self.callback is not None:
            self.callback.finalize(label=self.label)
