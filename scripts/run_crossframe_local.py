# scripts/run_crossframe_local.py
from __future__ import annotations

import logging

from crossframe.api import (
    CrossFrameConfig,
    DataModel,
    FoldModel,
    TreatmentModel,
    run_cross_frame_from_cfg,
    save_plan,
)

# ==== EDIT THESE AS YOU LIKE ==================================================
DATA = DataModel(
    path=r"./data/train.csv",
    delimiter=None,       # inferred from the first line
    has_header=True,
)

FOLDS = FoldModel(
    mode="kfold",         # "kfold" | "stratified" | "grouped"
    n_folds=5,
    group_column=None,    # required for mode="grouped"; never an input
)

TREATMENT = TreatmentModel(
    outcome_kind="binary",
    outcome_target=True,
    rare_count=2,
    min_fraction=0.02,
    smoothing=1.0,
)

INPUTS = ["x_signal", "x_weak", "x_noise"]
OUTCOME = "y"
SEED = 42
N_JOBS = 1
SAVE_PLAN = False
# ============================================================================


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg = CrossFrameConfig(
        data=DATA,
        input_columns=INPUTS,
        outcome_column=OUTCOME,
        folds=FOLDS,
        treatment=TREATMENT,
        seed=SEED,
        n_jobs=N_JOBS,
    )
    result = run_cross_frame_from_cfg(cfg)

    print("\n=== CROSS FRAME ===")
    print(f"Rows: {result.cross_frame.shape[0]}  Folds: {result.folds.n_folds} {result.folds.fold_sizes()}")
    print(f"Derived columns: {result.derived_columns}")
    print("\n=== SCORE FRAME (out-of-fold) ===")
    print(result.score_frame.to_string(index=False))

    if result.notes:
        print("\nNotes:")
        for n in result.notes:
            print(f"- {n}")

    if SAVE_PLAN:
        uid, meta = save_plan(result.plan)
        print(f"\nSaved treatment plan uid={uid} ({len(meta['derived_columns'])} derived columns)")


if __name__ == "__main__":
    main()
