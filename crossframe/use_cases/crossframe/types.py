from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np
import pandas as pd

from crossframe.components.splitters.types import FoldAssignment
from crossframe.contracts.results.crossframe import CrossFrameSummary, ScoreRow


@dataclass
class FoldOutput:
    fold_id: int
    idx_apply: np.ndarray
    frame: pd.DataFrame
    n_fit: int


@dataclass
class CrossFrameResult:
    plan: Any
    cross_frame: pd.DataFrame
    folds: FoldAssignment
    score_frame: pd.DataFrame
    seed: int
    fold_mode: str
    outcome_column: str
    notes: List[str] = field(default_factory=list)

    @property
    def derived_columns(self) -> List[str]:
        return [c for c in self.cross_frame.columns if c != self.outcome_column]

    def summary(self, *, plan_uid: Optional[str] = None) -> CrossFrameSummary:
        scores = [ScoreRow(**row) for row in self.score_frame.to_dict(orient="records")]
        return CrossFrameSummary(
            n_rows=int(self.cross_frame.shape[0]),
            n_folds=int(self.folds.n_folds),
            fold_mode=self.fold_mode,
            seed=int(self.seed),
            fold_sizes=self.folds.fold_sizes(),
            outcome_column=self.outcome_column,
            derived_columns=self.derived_columns,
            score_frame=scores,
            plan_uid=plan_uid,
            notes=list(self.notes),
        )
