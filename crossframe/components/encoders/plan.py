from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from crossframe.errors import ConfigurationError

from .treatments import CategoricalTreatment, NumericTreatment

Treatment = Union[NumericTreatment, CategoricalTreatment]


@dataclass
class TreatmentPlan:
    """Fitted treatments for every input variable.

    A plan fit on all training rows is the long-lived artifact returned to the
    caller; plans fit on fold complements live only inside the fold loop.
    """

    outcome_column: str
    outcome_kind: str
    outcome_target: Optional[Any]
    treatments: Dict[str, Treatment]
    n_rows: int
    # Mean outcome (numeric) or positive rate (binary) of the fit rows
    outcome_mean: float
    settings: Dict[str, Any] = field(default_factory=dict)

    @property
    def input_columns(self) -> List[str]:
        return list(self.treatments.keys())

    def derived(self) -> List[Tuple[str, str, str]]:
        """Return ``(varName, origName, code)`` for each derived column."""
        out: List[Tuple[str, str, str]] = []
        for variable, treatment in self.treatments.items():
            out.extend((name, variable, code) for name, code in treatment.derived())
        return out

    @property
    def derived_columns(self) -> List[str]:
        return [name for name, _, _ in self.derived()]

    def transform(self, dataset: pd.DataFrame) -> pd.DataFrame:
        """Apply the plan to ``dataset``; the result keeps its index."""
        missing = [c for c in self.input_columns if c not in dataset.columns]
        if missing:
            raise ConfigurationError(f"Dataset is missing treated column(s): {missing}")

        parts: Dict[str, np.ndarray] = {}
        for variable, treatment in self.treatments.items():
            parts.update(treatment.transform(dataset[variable]))
        return pd.DataFrame(parts, index=dataset.index, columns=self.derived_columns)

    def describe(self) -> pd.DataFrame:
        return pd.DataFrame(self.derived(), columns=["varName", "origName", "code"])
