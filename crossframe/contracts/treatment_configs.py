from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .choices import ALL_CODES, OutcomeKind, TreatmentCode


class TreatmentModel(BaseModel):
    outcome_kind: OutcomeKind = "numeric"
    # Value of the outcome column counted as the positive class (binary only).
    outcome_target: Optional[Union[bool, int, float, str]] = None

    codes: List[TreatmentCode] = Field(default_factory=lambda: list(ALL_CODES))

    # Levels seen fewer than rare_count times are pooled into "_rare_".
    rare_count: int = 0
    # Minimum level prevalence for a "lev" indicator column.
    min_fraction: float = 0.02
    # Pseudo-count pulling level statistics toward the grand mean.
    smoothing: float = 1.0
