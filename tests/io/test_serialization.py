from io import BytesIO

import joblib
import pytest

from crossframe.components.encoders import TreatmentEncoder
from crossframe.contracts.treatment_configs import TreatmentModel
from crossframe.errors import PlanArtifactError
from crossframe.io.artifacts.serialization import (
    MAGIC_KEY,
    build_plan_meta,
    load_plan_artifact,
    save_plan_artifact,
)


@pytest.fixture
def plan(small_df):
    return TreatmentEncoder(TreatmentModel()).fit(small_df, ["x_num", "x_cat"], "y")


def _dump(obj) -> bytes:
    buf = BytesIO()
    joblib.dump(obj, buf)
    return buf.getvalue()


def test_save_and_load_plan_artifact(plan):
    meta = build_plan_meta(plan, "u1")
    saved = save_plan_artifact(plan, meta)

    assert saved.size == len(saved.content_bytes)
    assert len(saved.sha256) == 64
    assert meta["payload_hash"] == saved.sha256

    loaded, loaded_meta = load_plan_artifact(saved.content_bytes)
    assert loaded == plan
    assert loaded_meta["uid"] == "u1"
    assert loaded_meta["input_columns"] == ["x_num", "x_cat"]
    assert loaded_meta["outcome_kind"] == "numeric"


def test_load_accepts_a_buffer(plan):
    saved = save_plan_artifact(plan, build_plan_meta(plan, "u2"))
    loaded, _ = load_plan_artifact(BytesIO(saved.content_bytes))
    assert loaded == plan


def test_save_rejects_non_plans(plan):
    with pytest.raises(PlanArtifactError, match="TreatmentPlan"):
        save_plan_artifact({"not": "a plan"}, build_plan_meta(plan, "u3"))


def test_save_rejects_incomplete_meta(plan):
    meta = build_plan_meta(plan, "u4")
    del meta["created_at"]
    with pytest.raises(PlanArtifactError, match="created_at"):
        save_plan_artifact(plan, meta)


def test_load_rejects_foreign_payload():
    with pytest.raises(PlanArtifactError, match="Not a valid"):
        load_plan_artifact(_dump({"something": "else"}))


def test_load_rejects_other_schema_versions(plan):
    package = {
        MAGIC_KEY: True,
        "schema_version": "0",
        "meta": build_plan_meta(plan, "u5"),
        "plan": plan,
    }
    with pytest.raises(PlanArtifactError, match="schema_version"):
        load_plan_artifact(_dump(package))


def test_load_rejects_wrong_plan_type(plan):
    package = {
        MAGIC_KEY: True,
        "schema_version": "1",
        "meta": build_plan_meta(plan, "u6"),
        "plan": [1, 2, 3],
    }
    with pytest.raises(PlanArtifactError, match="Corrupt"):
        load_plan_artifact(_dump(package))


def test_load_rejects_meta_that_does_not_describe_the_plan(plan):
    meta = build_plan_meta(plan, "u7")
    meta["derived_columns"] = ["something_else"]
    package = {MAGIC_KEY: True, "schema_version": "1", "meta": meta, "plan": plan}
    with pytest.raises(PlanArtifactError, match="derived_columns"):
        load_plan_artifact(_dump(package))


def test_meta_records_package_version(plan):
    from crossframe import __version__

    _, meta = load_plan_artifact(save_plan_artifact(plan, build_plan_meta(plan, "u8")).content_bytes)
    assert meta["crossframe_version"] == __version__
