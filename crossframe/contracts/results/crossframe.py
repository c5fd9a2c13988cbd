"""JSON-shaped results of a cross-frame run.

Field names in :class:`ScoreRow` follow the score-frame columns. All models
forbid unknown fields.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

Record = Dict[str, Any]


class ResultModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ScoreRow(ResultModel):
    varName: str
    origName: str
    code: str
    rsq: float
    sig: float


class CrossFrameSummary(ResultModel):
    """Description of a cross-frame run."""

    n_rows: int
    n_folds: int
    fold_mode: str
    seed: int
    fold_sizes: List[int]
    outcome_column: str
    derived_columns: List[str]
    score_frame: List[ScoreRow] = Field(default_factory=list)
    plan_uid: Optional[str] = None
    notes: List[str] = Field(default_factory=list)


class TreatedRecords(ResultModel):
    columns: List[str]
    records: List[Record]
