from __future__ import annotations

"""Fold assignment contracts.

Assigners yield a *single, stable* payload shape: one fold id per row. Index
splits are derived from it, so every consumer sees the same partition.
"""

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class FoldSplit:
    """One fold of a cross frame.

    ``idx_fit`` are the complement rows the per-fold encoding is fit on;
    ``idx_apply`` are the held-out rows it is applied to. Both are sorted
    positional indices into the original dataset.
    """

    fold_id: int
    idx_fit: np.ndarray
    idx_apply: np.ndarray


@dataclass(frozen=True)
class FoldAssignment:
    fold_ids: np.ndarray
    n_folds: int

    @property
    def n_rows(self) -> int:
        return int(self.fold_ids.shape[0])

    def fold_sizes(self) -> list[int]:
        return [int(v) for v in np.bincount(self.fold_ids, minlength=self.n_folds)]

    def splits(self) -> Iterator[FoldSplit]:
        for fold_id in range(self.n_folds):
            mask = self.fold_ids == fold_id
            yield FoldSplit(
                fold_id=fold_id,
                idx_fit=np.flatnonzero(~mask),
                idx_apply=np.flatnonzero(mask),
            )
