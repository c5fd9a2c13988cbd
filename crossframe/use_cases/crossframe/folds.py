from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import pandas as pd
from joblib import Parallel, delayed

from crossframe.components.interfaces import VariableEncoder
from crossframe.components.splitters.types import FoldAssignment, FoldSplit
from crossframe.core.progress import FoldProgress, ProgressCallback
from crossframe.errors import CrossFrameError, FoldError

from .types import FoldOutput

logger = logging.getLogger(__name__)


def run_fold(
    *,
    encoder: VariableEncoder,
    dataset: pd.DataFrame,
    columns: Sequence[str],
    outcome_column: str,
    reference: Any,
    split: FoldSplit,
) -> FoldOutput:
    """Fit on the fold complement, apply to the held-out rows.

    The per-fold model is local to this call and discarded on return.
    """
    try:
        fit_rows = dataset.iloc[split.idx_fit]
        apply_rows = dataset.iloc[split.idx_apply]
        model = encoder.fit(fit_rows, columns, outcome_column, reference=reference, validate=False)
        frame = encoder.apply(model, apply_rows)
    except CrossFrameError as e:
        e.fold_id = split.fold_id
        raise
    except Exception as e:
        raise FoldError(split.fold_id, f"{type(e).__name__}: {e}") from e

    if int(frame.shape[0]) != int(split.idx_apply.shape[0]):
        raise FoldError(
            split.fold_id,
            f"encoder returned {frame.shape[0]} rows for {split.idx_apply.shape[0]} held-out rows",
        )

    return FoldOutput(
        fold_id=split.fold_id,
        idx_apply=split.idx_apply,
        frame=frame,
        n_fit=int(split.idx_fit.shape[0]),
    )


def run_folds(
    *,
    encoder: VariableEncoder,
    dataset: pd.DataFrame,
    columns: Sequence[str],
    outcome_column: str,
    reference: Any,
    folds: FoldAssignment,
    n_jobs: Optional[int] = 1,
    progress: Optional[ProgressCallback] = None,
) -> List[FoldOutput]:
    """Run every fold; fold fits are independent and may run on joblib threads.

    Fail-fast: the first failing fold aborts the run and its error propagates.
    Outputs are returned in fold-id order regardless of completion order.
    """
    splits = list(folds.splits())
    tracker = FoldProgress(progress, n_folds=len(splits))
    tracker.start()

    parallel = Parallel(n_jobs=n_jobs, prefer="threads", return_as="generator")
    tasks = (
        delayed(run_fold)(
            encoder=encoder,
            dataset=dataset,
            columns=columns,
            outcome_column=outcome_column,
            reference=reference,
            split=split,
        )
        for split in splits
    )

    outputs: List[FoldOutput] = []
    for out in parallel(tasks):
        logger.debug("fold %d: fit on %d rows, applied to %d rows", out.fold_id, out.n_fit, out.idx_apply.shape[0])
        outputs.append(out)
        tracker.fold_done(out.fold_id)

    tracker.finish()

    return sorted(outputs, key=lambda o: o.fold_id)
