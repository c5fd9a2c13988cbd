from __future__ import annotations

"""Per-derived-variable scoring of a cross frame.

Reporting only: nothing is pruned based on these numbers.
"""

import numpy as np
import pandas as pd
from scipy.stats import pearsonr

from .plan import TreatmentPlan

SCORE_COLUMNS = ["varName", "origName", "code", "rsq", "sig"]


def score_frame(cross_frame: pd.DataFrame, plan: TreatmentPlan, outcome: np.ndarray) -> pd.DataFrame:
    """Squared correlation of each derived column with the outcome, and its p-value.

    Scores are computed on the cross frame, so impact-coded columns are
    judged on out-of-fold values.
    """
    y = np.asarray(outcome, dtype=float).ravel()
    y_constant = y.size < 3 or float(np.ptp(y)) == 0.0

    rows = []
    for name, orig, code in plan.derived():
        x = cross_frame[name].to_numpy(dtype=float)
        if y_constant or float(np.ptp(x)) == 0.0:
            rsq, sig = 0.0, 1.0
        else:
            r, p = pearsonr(x, y)
            rsq, sig = float(r) ** 2, float(p)
        rows.append((name, orig, code, rsq, sig))
    return pd.DataFrame(rows, columns=SCORE_COLUMNS)
