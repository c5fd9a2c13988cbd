from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from crossframe.components.splitters.fold_assignment import (
    grouped_ids,
    kfold_ids,
    stratified_binary_ids,
    stratified_numeric_ids,
)
from crossframe.components.splitters.types import FoldAssignment
from crossframe.contracts.fold_configs import FoldModel
from crossframe.errors import ConfigurationError


def _check_counts(n_rows: int, n_folds: int) -> None:
    if n_folds < 2:
        raise ConfigurationError(f"fold count must be at least 2; got {n_folds}")
    if n_rows < n_folds:
        raise ConfigurationError(f"cannot split {n_rows} rows into {n_folds} folds")


@dataclass
class KFoldAssigner:
    cfg: FoldModel
    seed: Optional[int] = None

    def assign(
        self,
        n_rows: int,
        *,
        outcome: Optional[np.ndarray] = None,
        groups: Optional[np.ndarray] = None,
    ) -> FoldAssignment:
        k = int(self.cfg.n_folds)
        _check_counts(n_rows, k)
        ids = kfold_ids(n_rows, k, random_state=int(self.seed or 0))
        return FoldAssignment(fold_ids=ids, n_folds=k)


@dataclass
class StratifiedFoldAssigner:
    cfg: FoldModel
    seed: Optional[int] = None

    def assign(
        self,
        n_rows: int,
        *,
        outcome: Optional[np.ndarray] = None,
        groups: Optional[np.ndarray] = None,
    ) -> FoldAssignment:
        k = int(self.cfg.n_folds)
        _check_counts(n_rows, k)
        if outcome is None:
            raise ConfigurationError("stratified folds require the outcome values")
        y = np.asarray(outcome).ravel()
        if y.shape[0] != n_rows:
            raise ConfigurationError(f"outcome length mismatch: {y.shape[0]} vs {n_rows}")

        if y.dtype == bool:
            try:
                ids = stratified_binary_ids(y, k, random_state=int(self.seed or 0))
            except ValueError as e:
                raise ConfigurationError(f"stratified folds: {e}") from e
        else:
            ids = stratified_numeric_ids(y, k, np.random.default_rng(self.seed))
        return FoldAssignment(fold_ids=ids, n_folds=k)


@dataclass
class GroupedFoldAssigner:
    cfg: FoldModel
    seed: Optional[int] = None

    def assign(
        self,
        n_rows: int,
        *,
        outcome: Optional[np.ndarray] = None,
        groups: Optional[np.ndarray] = None,
    ) -> FoldAssignment:
        k = int(self.cfg.n_folds)
        _check_counts(n_rows, k)
        if groups is None:
            raise ConfigurationError("grouped folds require a group column")
        g = np.asarray(groups, dtype=object).ravel()
        if g.shape[0] != n_rows:
            raise ConfigurationError(f"group length mismatch: {g.shape[0]} vs {n_rows}")
        try:
            ids = grouped_ids(g, k, np.random.default_rng(self.seed))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        return FoldAssignment(fold_ids=ids, n_folds=k)
