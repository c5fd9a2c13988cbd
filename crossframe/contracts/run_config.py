from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .fold_configs import FoldModel
from .treatment_configs import TreatmentModel


class DataModel(BaseModel):
    path: Optional[str] = None

    # Optional parsing hints for csv/tsv/txt tables.
    delimiter: Optional[str] = None
    has_header: Optional[bool] = None
    encoding: Optional[str] = None


class CrossFrameConfig(BaseModel):
    data: Optional[DataModel] = None
    input_columns: List[str]
    outcome_column: str
    folds: FoldModel = Field(default_factory=FoldModel)
    treatment: TreatmentModel = Field(default_factory=TreatmentModel)
    seed: Optional[int] = None
    # joblib n_jobs for the per-fold fits; 1 runs them sequentially.
    n_jobs: Optional[int] = 1
