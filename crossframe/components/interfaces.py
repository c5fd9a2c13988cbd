from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

import numpy as np
import pandas as pd

from crossframe.components.splitters.types import FoldAssignment


class FoldAssigner(Protocol):
    def assign(
        self,
        n_rows: int,
        *,
        outcome: Optional[np.ndarray] = None,
        groups: Optional[np.ndarray] = None,
    ) -> FoldAssignment:
        """Return a fold id for every row.

        ``outcome`` is the prepared outcome (bool for binary, float for numeric)
        and is only read by stratified policies; ``groups`` only by grouped ones.
        """
        ...


class VariableEncoder(Protocol):
    """Per-variable treatment fit/apply.

    The assembler calls ``fit`` k+1 times (once on all rows, then once per fold
    complement with ``reference`` set to the full-data plan) and ``apply`` k
    times. Implementations that do not use ``reference`` may ignore it.
    """

    def fit(
        self,
        dataset: pd.DataFrame,
        columns: Sequence[str],
        outcome_column: str,
        *,
        reference: Optional[Any] = None,
        validate: bool = True,
    ) -> Any:
        """Return a fitted encoding model."""
        ...

    def apply(self, model: Any, dataset: pd.DataFrame) -> pd.DataFrame:
        """Transform ``dataset`` with a fitted model, keeping its index."""
        ...
