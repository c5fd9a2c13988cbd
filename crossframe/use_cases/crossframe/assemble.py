from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd

from crossframe.errors import CrossFrameError

from .types import FoldOutput


def assemble_cross_frame(outputs: List[FoldOutput], index: pd.Index) -> pd.DataFrame:
    """Concatenate held-out fold frames and restore the original row order.

    The result carries ``index`` (the training frame's index). Every row
    position must be covered exactly once.
    """
    if not outputs:
        raise CrossFrameError("No fold outputs to assemble")

    columns = list(outputs[0].frame.columns)
    for out in outputs[1:]:
        if list(out.frame.columns) != columns:
            raise CrossFrameError(
                f"Fold {out.fold_id} produced columns {list(out.frame.columns)}; expected {columns}"
            )

    positions = np.concatenate([np.asarray(o.idx_apply, dtype=int) for o in outputs])
    n_rows = len(index)
    if positions.shape[0] != n_rows or not np.array_equal(np.sort(positions), np.arange(n_rows)):
        raise CrossFrameError("Fold outputs do not cover every row exactly once")

    frame = pd.concat([o.frame.reset_index(drop=True) for o in outputs], axis=0, ignore_index=True)
    frame = frame.iloc[np.argsort(positions, kind="stable")].reset_index(drop=True)
    frame.index = index
    return frame
