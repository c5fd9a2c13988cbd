import pandas as pd
import pytest

from crossframe.api import (
    PlanArtifactError,
    TreatmentPlan,
    apply_treatments,
    cache_plan,
    design_treatments,
    get_cached_plan,
    load_plan,
    load_plan_bytes_to_cache,
    save_plan,
    save_plan_bytes_from_cache,
)
from crossframe.io.artifacts import FileSystemArtifactStore
from crossframe.runtime.caches.plan_cache import plan_cache


@pytest.fixture
def plan(small_df) -> TreatmentPlan:
    return design_treatments(small_df, ["x_num", "x_cat"], "y")


def test_save_and_load_plan_roundtrip(tmp_path, plan, small_df):
    store = FileSystemArtifactStore(tmp_path / "plans")
    uid, meta = save_plan(plan, store=store)

    assert store.exists(uid)
    assert meta["uid"] == uid
    assert meta["derived_columns"] == plan.derived_columns

    loaded = load_plan(uid, store=store)
    assert loaded == plan
    pd.testing.assert_frame_equal(loaded.transform(small_df), plan.transform(small_df))


def test_save_plan_uses_env_directory(tmp_path, plan):
    uid, _ = save_plan(plan, uid="fixed-uid")

    assert uid == "fixed-uid"
    assert (tmp_path / "artifacts" / "fixed-uid.plan.joblib").exists()
    assert (tmp_path / "artifacts" / "fixed-uid.plan.meta.json").exists()


def test_load_unknown_plan_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_plan("missing", store=FileSystemArtifactStore(tmp_path))


def test_apply_treatments_carries_outcome(plan, small_df):
    treated = apply_treatments(plan, small_df)
    assert list(treated.columns) == plan.derived_columns + ["y"]

    new = small_df.drop(columns=["y"])
    assert list(apply_treatments(plan, new).columns) == plan.derived_columns


def test_plan_cache_bytes_roundtrip(plan):
    uid = cache_plan(plan)
    assert get_cached_plan(uid) is plan

    saved = save_plan_bytes_from_cache(uid)
    assert saved.size == len(saved.content_bytes)

    plan_cache.clear()
    assert get_cached_plan(uid) is None

    meta = load_plan_bytes_to_cache(saved.content_bytes)
    assert meta["uid"] == uid
    assert get_cached_plan(uid) == plan


def test_saving_an_expired_plan_raises():
    with pytest.raises(PlanArtifactError, match="no longer available"):
        save_plan_bytes_from_cache("gone")


def test_plan_cache_expiry(plan):
    plan_cache.put("short", plan, ttl_seconds=-1)
    assert plan_cache.get("short") is None


def test_plan_cache_evicts_least_recently_used(plan):
    from crossframe.runtime.caches import PlanCache

    cache = PlanCache(max_entries=2)
    cache.put("a", plan)
    cache.put("b", plan)
    assert cache.get("a") is plan
    cache.put("c", plan)

    assert cache.get("b") is None
    assert cache.get("a") is plan
    assert cache.get("c") is plan


def test_cached_plan_keeps_its_created_at_through_bytes(plan):
    uid = cache_plan(plan)
    created = plan_cache.entry(uid).meta["created_at"]

    meta = load_plan_bytes_to_cache(save_plan_bytes_from_cache(uid).content_bytes)
    assert meta["created_at"] == created
    assert plan_cache.entry(uid).meta["created_at"] == created
