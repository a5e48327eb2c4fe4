"""Integration tests for the upload and replay workflow."""

from __future__ import annotations

import json

from fastapi.testclient import TestClient

from api.app import create_app
from core.config import TagfeedConfig
from store.dataset_service import DatasetService


def test_upload_replay_and_failed_reupload_flow() -> None:
    """A good upload should replay cyclically and survive a bad re-upload."""
    service = DatasetService()
    client = TestClient(create_app(service, TagfeedConfig(stream_interval_seconds=0.0)))
    payload = [{"DC_out_100ms[140].10": 0.5}, {"DC_out_100ms[140].10": "0.8"}]

    upload = client.post(
        "/data/upload",
        files={"file": ("shift-a.json", json.dumps(payload).encode("utf-8"), "application/json")},
    )
    client.get("/data/next")
    rejected = client.post("/data/upload-json", json=[{"ok": 1}, "not-an-object"])
    info = client.get("/data/info").json()
    replay = [client.get("/data/next").json()["record"] for _ in range(2)]

    assert upload.status_code == 200 and rejected.status_code == 400
    assert (info["sourceLabel"], info["currentIndex"]) == ("shift-a.json", 1)
    assert replay == [{"DC_out_100ms[140].10": 0.8}, {"DC_out_100ms[140].10": 0.5}]
