import numpy as np
import pandas as pd
import pytest
from scipy.special import logit

from crossframe.components.encoders import (
    NA_LEVEL,
    RARE_LEVEL,
    CategoricalTreatment,
    NumericTreatment,
    TreatmentEncoder,
    prepare_outcome,
)
from crossframe.contracts.treatment_configs import TreatmentModel
from crossframe.errors import ConfigurationError, DataError


@pytest.fixture
def encoder():
    return TreatmentEncoder(TreatmentModel())


def test_derived_column_layout(encoder, small_df):
    plan = encoder.fit(small_df, ["x_num", "x_cat"], "y")

    assert isinstance(plan.treatments["x_num"], NumericTreatment)
    assert isinstance(plan.treatments["x_cat"], CategoricalTreatment)
    assert plan.derived_columns == [
        "x_num_clean",
        "x_num_isBAD",
        "x_cat_catN",
        "x_cat_catP",
        f"x_cat_lev_{NA_LEVEL}",
        "x_cat_lev_a",
        "x_cat_lev_b",
        "x_cat_lev_c",
    ]
    assert plan.input_columns == ["x_num", "x_cat"]
    assert plan.n_rows == 6
    assert plan.outcome_mean == pytest.approx(20.0 / 6.0)
    assert list(plan.describe().columns) == ["varName", "origName", "code"]


def test_numeric_clean_and_isbad(encoder, small_df):
    plan = encoder.fit(small_df, ["x_num", "x_cat"], "y")
    out = plan.transform(small_df)

    assert out.index.equals(small_df.index)
    assert out["x_num_clean"].tolist() == pytest.approx([1.0, 2.0, 3.6, 4.0, 5.0, 6.0])
    assert out["x_num_isBAD"].tolist() == [0.0, 0.0, 1.0, 0.0, 0.0, 0.0]


def test_isbad_only_when_fit_data_has_missing_values(encoder, small_df):
    df = small_df.assign(x_num=[1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    plan = encoder.fit(df, ["x_num"], "y")

    assert plan.derived_columns == ["x_num_clean"]


def test_catn_is_smoothed_level_mean_minus_grand_mean(encoder, small_df):
    plan = encoder.fit(small_df, ["x_cat"], "y")
    out = plan.transform(small_df)

    grand = small_df["y"].mean()
    expected_a = (1.0 + 3.0 + grand) / 3.0 - grand
    expected_c = (10.0 + grand) / 2.0 - grand
    expected_na = (0.0 + grand) / 2.0 - grand

    assert out.loc[0, "x_cat_catN"] == pytest.approx(expected_a)
    assert out.loc[4, "x_cat_catN"] == pytest.approx(expected_c)
    assert out.loc[5, "x_cat_catN"] == pytest.approx(expected_na)
    assert out["x_cat_catP"].tolist() == pytest.approx([2 / 6, 2 / 6, 2 / 6, 2 / 6, 1 / 6, 1 / 6])
    assert out[f"x_cat_lev_{NA_LEVEL}"].tolist() == [0.0, 0.0, 0.0, 0.0, 0.0, 1.0]


def test_catb_for_binary_outcome():
    df = pd.DataFrame(
        {
            "x": ["a"] * 4 + ["b"] * 4,
            "y": [True, True, True, False, False, False, False, True],
        }
    )
    enc = TreatmentEncoder(TreatmentModel(outcome_kind="binary", outcome_target=True))
    plan = enc.fit(df, ["x"], "y")
    out = plan.transform(df)

    assert "x_catB" in plan.derived_columns
    assert "x_catN" not in plan.derived_columns
    # smoothed rates: (3 + 0.5) / 5 and (1 + 0.5) / 5 around a base rate of 0.5
    assert out.loc[0, "x_catB"] == pytest.approx(float(logit(0.7) - logit(0.5)))
    assert out.loc[4, "x_catB"] == pytest.approx(float(logit(0.3) - logit(0.5)))
    assert out.loc[0, "x_catB"] == pytest.approx(-out.loc[4, "x_catB"])


def test_binary_outcome_target_can_be_a_label():
    df = pd.DataFrame({"x": ["a", "b", "a", "b"], "y": ["yes", "no", "no", "yes"]})
    y = prepare_outcome(df, "y", TreatmentModel(outcome_kind="binary", outcome_target="yes"))

    assert y.dtype == bool
    assert y.tolist() == [True, False, False, True]


def test_novel_levels_get_neutral_codes(encoder, small_df):
    plan = encoder.fit(small_df, ["x_num", "x_cat"], "y")
    new = pd.DataFrame({"x_num": [np.nan], "x_cat": ["never_seen"]}, index=[42])
    out = plan.transform(new)

    assert out.index.tolist() == [42]
    assert out.loc[42, "x_cat_catN"] == 0.0
    assert out.loc[42, "x_cat_catP"] == 0.0
    lev_cols = [c for c in out.columns if c.startswith("x_cat_lev_")]
    assert out.loc[42, lev_cols].sum() == 0.0
    assert out.loc[42, "x_num_clean"] == pytest.approx(3.6)
    assert out.loc[42, "x_num_isBAD"] == 1.0


def test_rare_levels_are_pooled():
    df = pd.DataFrame(
        {
            "x": ["a", "a", "a", "b", "b", "c"],
            "y": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
        }
    )
    plan = TreatmentEncoder(TreatmentModel(rare_count=2)).fit(df, ["x"], "y")
    treatment = plan.treatments["x"]

    assert treatment.rare_levels == frozenset({"c"})
    assert RARE_LEVEL in treatment.indicator_levels
    assert "c" not in treatment.indicator_levels

    out = plan.transform(pd.DataFrame({"x": ["c", "d"]}))
    assert out[f"x_lev_{RARE_LEVEL}"].tolist() == [1.0, 0.0]
    assert out["x_catP"].tolist() == pytest.approx([1 / 6, 0.0])


def test_min_fraction_limits_indicators():
    df = pd.DataFrame({"x": ["a"] * 9 + ["b"], "y": np.arange(10, dtype=float)})
    plan = TreatmentEncoder(TreatmentModel(min_fraction=0.2)).fit(df, ["x"], "y")

    assert plan.treatments["x"].indicator_levels == ("a",)


def test_codes_select_treatments(small_df):
    plan = TreatmentEncoder(TreatmentModel(codes=["clean", "catP"])).fit(small_df, ["x_num", "x_cat"], "y")

    assert plan.derived_columns == ["x_num_clean", "x_cat_catP"]


def test_bool_columns_are_categorical(small_df):
    df = small_df.assign(flag=[True, False, True, False, True, True])
    plan = TreatmentEncoder(TreatmentModel(codes=["lev"])).fit(df, ["flag"], "y")

    assert plan.derived_columns == ["flag_lev_False", "flag_lev_True"]


def test_reference_fixes_fold_layout(encoder, small_df):
    full = encoder.fit(small_df, ["x_num", "x_cat"], "y")
    # rows 0, 1 and 3 hold no missing value and no 'c'
    part = small_df.iloc[[0, 1, 3]]
    fold_plan = encoder.fit(part, ["x_num", "x_cat"], "y", reference=full, validate=False)

    assert fold_plan.derived_columns == full.derived_columns
    assert fold_plan.treatments["x_num"].mean == pytest.approx(7.0 / 3.0)
    assert fold_plan.treatments["x_cat"].prevalence == pytest.approx({"a": 2 / 3, "b": 1 / 3})


def test_fit_warns_when_fold_outcome_is_constant(encoder, small_df):
    full = encoder.fit(small_df, ["x_cat"], "y")
    part = small_df.assign(y=1.0).iloc[:3]

    with pytest.warns(RuntimeWarning, match="no variation"):
        fold_plan = encoder.fit(part, ["x_cat"], "y", reference=full, validate=False)
    assert set(fold_plan.treatments["x_cat"].impact.values()) == {0.0}


def test_constant_column_is_a_data_error(encoder, small_df):
    df = small_df.assign(k="same")
    with pytest.raises(DataError, match="constant"):
        encoder.fit(df, ["x_num", "k"], "y")


def test_all_missing_column_is_a_data_error(encoder, small_df):
    df = small_df.assign(empty=np.nan)
    with pytest.raises(DataError, match="entirely missing"):
        encoder.fit(df, ["empty"], "y")


def test_outcome_without_variation_is_a_data_error(encoder, small_df):
    with pytest.raises(DataError, match="no variation"):
        encoder.fit(small_df.assign(y=3.0), ["x_num"], "y")


def test_missing_outcome_values_are_a_data_error(encoder, small_df):
    df = small_df.copy()
    df.loc[2, "y"] = np.nan
    with pytest.raises(DataError, match="missing"):
        encoder.fit(df, ["x_num"], "y")


def test_binary_without_target_is_a_configuration_error(small_df):
    enc = TreatmentEncoder(TreatmentModel(outcome_kind="binary"))
    with pytest.raises(ConfigurationError, match="outcome_target"):
        enc.fit(small_df, ["x_num"], "y")


def test_transform_requires_treated_columns(encoder, small_df):
    plan = encoder.fit(small_df, ["x_num", "x_cat"], "y")
    with pytest.raises(ConfigurationError, match="x_cat"):
        plan.transform(small_df[["x_num"]])


def test_reference_keeps_full_data_rare_pooling():
    df = pd.DataFrame({"x": ["a"] * 9 + ["b"] * 3 + ["c"], "y": np.arange(13, dtype=float)})
    enc = TreatmentEncoder(TreatmentModel(rare_count=3, min_fraction=0.0))
    full = enc.fit(df, ["x"], "y")
    assert full.treatments["x"].rare_levels == frozenset({"c"})

    # only two 'b' rows and no 'c' row: 'b' would look rare here on its own
    part = df.iloc[[0, 1, 2, 3, 4, 9, 10]]
    fold_plan = enc.fit(part, ["x"], "y", reference=full, validate=False)

    assert fold_plan.treatments["x"].rare_levels == frozenset({"c"})
    out = fold_plan.transform(pd.DataFrame({"x": ["b", "c"]}))
    assert out["x_lev_b"].tolist() == [1.0, 0.0]
    assert out[f"x_lev_{RARE_LEVEL}"].tolist() == [0.0, 1.0]


def test_colliding_derived_names_are_rejected():
    df = pd.DataFrame(
        {
            "x": ["clean", "other", "clean", "other"],
            "x_lev": [1.0, 2.0, 3.0, 4.0],
            "y": [1.0, 2.0, 0.0, 5.0],
        }
    )
    with pytest.raises(ConfigurationError, match="more than once"):
        TreatmentEncoder(TreatmentModel()).fit(df, ["x", "x_lev"], "y")


def test_derived_name_matching_outcome_is_rejected():
    df = pd.DataFrame({"x": [1.0, 2.0, 3.0, 4.0], "x_clean": [0.0, 1.0, 0.0, 1.0]})
    with pytest.raises(ConfigurationError, match="clashes with the outcome"):
        TreatmentEncoder(TreatmentModel()).fit(df, ["x"], "x_clean")
