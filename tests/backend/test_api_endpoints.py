import pytest
from fastapi.testclient import TestClient

from backend.app.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def records():
    cats = ["a", "b", "c"]
    return [
        {"x_num": float(i), "x_cat": cats[i % 3], "y": float((i * 7) % 5)}
        for i in range(12)
    ]


def _config(**overrides):
    cfg = {
        "input_columns": ["x_num", "x_cat"],
        "outcome_column": "y",
        "folds": {"mode": "kfold", "n_folds": 3},
        "seed": 1,
    }
    cfg.update(overrides)
    return cfg


def test_health(client):
    assert client.get("/healthz").json() == {"ok": True}
    ping = client.get("/api/v1/ping").json()
    assert ping["ok"] is True
    assert ping["fold_modes"] == ["grouped", "kfold", "stratified"]


def test_crossframe_then_apply(client, records):
    r = client.post("/api/v1/crossframe", json={"records": records, "config": _config()})
    assert r.status_code == 200, r.text
    body = r.json()

    summary = body["summary"]
    assert summary["n_rows"] == 12
    assert summary["n_folds"] == 3
    assert summary["fold_sizes"] == [4, 4, 4]
    assert summary["plan_uid"]
    assert [row["varName"] for row in summary["score_frame"]] == summary["derived_columns"]

    cross = body["cross_frame"]
    assert cross["columns"] == summary["derived_columns"] + ["y"]
    assert len(cross["records"]) == 12
    assert [rec["y"] for rec in cross["records"]] == [rec["y"] for rec in records]

    r = client.post(
        "/api/v1/treatments/apply",
        json={"plan_uid": summary["plan_uid"], "records": [{"x_num": 2.5, "x_cat": "zzz"}]},
    )
    assert r.status_code == 200, r.text
    treated = r.json()["treated"]
    assert treated["columns"] == summary["derived_columns"]
    assert treated["records"][0]["x_cat_catN"] == 0.0
    assert treated["records"][0]["x_num_clean"] == 2.5


def test_apply_unknown_plan_is_404(client):
    r = client.post("/api/v1/treatments/apply", json={"plan_uid": "nope", "records": []})
    assert r.status_code == 404


def test_bad_fold_count_is_400(client, records):
    r = client.post("/api/v1/crossframe", json={"records": records, "config": _config(folds={"n_folds": 1})})
    assert r.status_code == 400
    assert "at least 2" in r.json()["detail"]


def test_missing_outcome_is_400(client, records):
    r = client.post("/api/v1/crossframe", json={"records": records, "config": _config(outcome_column="nope")})
    assert r.status_code == 400


def test_constant_column_is_400(client, records):
    rows = [dict(rec, k="same") for rec in records]
    r = client.post(
        "/api/v1/crossframe",
        json={"records": rows, "config": _config(input_columns=["x_num", "k"])},
    )
    assert r.status_code == 400
    assert "constant" in r.json()["detail"]


def test_unknown_fold_mode_is_rejected_by_validation(client, records):
    r = client.post(
        "/api/v1/crossframe",
        json={"records": records, "config": _config(folds={"mode": "leave_one_out"})},
    )
    assert r.status_code == 422


def test_progress_is_reported(client, records):
    r = client.post(
        "/api/v1/crossframe",
        json={"records": records, "config": _config(), "progress_id": "job-1"},
    )
    assert r.status_code == 200

    progress = client.get("/api/v1/progress/job-1").json()
    assert progress["done"] is True
    assert progress["percent"] == 100.0
    assert progress["error"] is None
    assert progress["n_folds"] == 3
    assert progress["folds_done"] == 3

    assert client.get("/api/v1/progress/unknown").status_code == 404


def test_plan_download_and_load(client, records):
    body = client.post("/api/v1/crossframe", json={"records": records, "config": _config()}).json()
    uid = body["summary"]["plan_uid"]

    r = client.get(f"/api/v1/plans/{uid}/download")
    assert r.status_code == 200
    assert r.headers["X-CROSSFRAME-Size"] == str(len(r.content))

    r = client.post("/api/v1/plans/load", content=r.content)
    assert r.status_code == 200, r.text
    loaded = r.json()
    assert loaded["plan_uid"] == uid
    assert loaded["created_at"]
    assert loaded["derived_columns"] == body["summary"]["derived_columns"]


def test_plan_download_unknown_is_404(client):
    assert client.get("/api/v1/plans/nope/download").status_code == 404


def test_plan_load_rejects_garbage(client):
    assert client.post("/api/v1/plans/load", content=b"").status_code == 400
    assert client.post("/api/v1/plans/load", content=b"not a plan").status_code == 400
