from __future__ import annotations

"""Full-data treatment design and application.

``design_treatments`` fits a plan on every row and nothing else. Applying
that plan back to the same rows leaks each row's outcome into its own
impact code; use :func:`crossframe.use_cases.crossframe.cross_frame_experiment`
to prepare training data and this plan only for new data.
"""

from typing import Optional, Sequence

import pandas as pd

from crossframe.components.encoders.plan import TreatmentPlan
from crossframe.contracts.treatment_configs import TreatmentModel
from crossframe.errors import ConfigurationError
from crossframe.factories.encoder_factory import make_encoder


def design_treatments(
    dataset: pd.DataFrame,
    input_columns: Sequence[str],
    outcome_column: str,
    treatment: Optional[TreatmentModel] = None,
) -> TreatmentPlan:
    if outcome_column not in dataset.columns:
        raise ConfigurationError(f"Outcome column {outcome_column!r} not found in dataset")
    if outcome_column in input_columns:
        raise ConfigurationError(f"Outcome column {outcome_column!r} cannot be an input")
    return make_encoder(treatment).fit(dataset, list(input_columns), outcome_column)


def apply_treatments(plan: TreatmentPlan, dataset: pd.DataFrame) -> pd.DataFrame:
    """Transform ``dataset`` with ``plan``; the outcome column is carried over when present."""
    treated = plan.transform(dataset)
    if plan.outcome_column in dataset.columns:
        treated[plan.outcome_column] = dataset[plan.outcome_column].to_numpy()
    return treated
