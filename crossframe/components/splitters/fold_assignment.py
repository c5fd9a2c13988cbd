from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from numpy.random import Generator
from sklearn.model_selection import KFold, StratifiedKFold


def kfold_ids(n_rows: int, n_folds: int, random_state: int) -> np.ndarray:
    """Uniform random fold ids; fold sizes differ by at most one."""
    ids = np.empty(n_rows, dtype=int)
    splitter = KFold(n_splits=n_folds, shuffle=True, random_state=random_state)
    for fold_id, (_, idx_te) in enumerate(splitter.split(np.zeros((n_rows, 1)))):
        ids[idx_te] = fold_id
    return ids


def stratified_binary_ids(y: np.ndarray, n_folds: int, random_state: int) -> np.ndarray:
    """Fold ids preserving the positive rate in every fold (sklearn StratifiedKFold)."""
    y = np.asarray(y).astype(int).ravel()
    ids = np.empty(y.shape[0], dtype=int)
    splitter = StratifiedKFold(n_splits=n_folds, shuffle=True, random_state=random_state)
    for fold_id, (_, idx_te) in enumerate(splitter.split(np.zeros((y.shape[0], 1)), y)):
        ids[idx_te] = fold_id
    return ids


def stratified_numeric_ids(y: np.ndarray, n_folds: int, rng: Generator) -> np.ndarray:
    """Order rows by outcome and deal a random permutation of fold ids per block of k.

    Every fold then spans the outcome range, and sizes differ by at most one
    (the trailing partial block receives distinct fold ids).
    """
    y = np.asarray(y, dtype=float).ravel()
    n = y.shape[0]
    # random tie-break so equal outcomes are not dealt in input order
    order = np.lexsort((rng.permutation(n), y))
    ids = np.empty(n, dtype=int)
    for start in range(0, n, n_folds):
        block = order[start:start + n_folds]
        ids[block] = rng.permutation(n_folds)[: block.size]
    return ids


def grouped_ids(groups: Any, n_folds: int, rng: Generator) -> np.ndarray:
    """Keep each group in a single fold.

    Groups are visited in random order and placed into the currently smallest
    fold. Missing group values form one group of their own.
    """
    codes, uniques = pd.factorize(pd.Series(groups), use_na_sentinel=False)
    n_groups = len(uniques)
    if n_groups < n_folds:
        raise ValueError(f"grouped folds need at least {n_folds} groups; got {n_groups}")

    sizes = np.bincount(codes, minlength=n_groups)
    fold_sizes = np.zeros(n_folds, dtype=int)
    group_fold = np.empty(n_groups, dtype=int)
    for g in rng.permutation(n_groups):
        f = int(np.argmin(fold_sizes))
        group_fold[g] = f
        fold_sizes[f] += sizes[g]
    return group_fold[codes]
