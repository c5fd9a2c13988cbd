from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .choices import FoldMode


class FoldModel(BaseModel):
    mode: FoldMode = "kfold"
    n_folds: int = 5
    # Only used by mode="grouped"; never a model input.
    group_column: Optional[str] = None
