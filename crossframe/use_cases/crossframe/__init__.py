"""Cross-frame construction (fold-wise treatment assembly).

- validation: fail-fast configuration checks
- folds: per-fold fit/apply, optionally in parallel
- assemble: merging fold outputs back into original row order
- run: the orchestrating use-case

Correctness requirement
-----------------------
Every cross-frame row is produced by an encoding fit on the *other* folds.
The full-data plan returned to the caller is never used to transform the
training rows.
"""

from .run import cross_frame_experiment
from .types import CrossFrameResult, FoldOutput

__all__ = ["cross_frame_experiment", "CrossFrameResult", "FoldOutput"]
