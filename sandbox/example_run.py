import pandas as pd

from crossframe.api import TreatmentModel, apply_treatments, build_cross_frame, design_treatments
from crossframe.components.encoders.scoring import score_frame
from crossframe.extras.datasets import make_high_cardinality_frame


def example_run(n_rows=500, n_levels=100, seed=0):
    d = make_high_cardinality_frame(n_rows=n_rows, n_levels=n_levels, seed=seed)
    inputs = ["x_signal", "x_weak", "x_noise"]
    treatment = TreatmentModel(outcome_kind="binary", outcome_target=True)

    # naive: design and apply on the same rows
    plan = design_treatments(d, inputs, "y", treatment=treatment)
    naive = apply_treatments(plan, d)
    naive_scores = score_frame(naive, plan, naive["y"] == True)  # noqa: E712

    plan, cross_frame = build_cross_frame(d, inputs, "y", fold_count=5, seed=seed, treatment=treatment)
    cross_scores = score_frame(cross_frame, plan, cross_frame["y"] == True)  # noqa: E712

    cols = ["varName", "rsq", "sig"]
    merged = pd.merge(
        naive_scores[cols], cross_scores[cols], on="varName", suffixes=("_naive", "_cross")
    )
    print(merged.to_string(index=False))


if __name__ == "__main__":
    example_run()
