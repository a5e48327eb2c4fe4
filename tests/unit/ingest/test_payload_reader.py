"""Unit tests for payload reader helpers."""

from __future__ import annotations

import io
import sys
import types
from pathlib import Path

import pytest

from core.config import TagfeedConfig
from core.errors import PayloadDecodeError, SourceReadError, UnsupportedUploadError
from ingest.payload_reader import (
    decode_json_payload,
    ensure_supported_upload,
    read_source_bytes,
)


def test_decode_json_payload_parses_utf8_json() -> None:
    """Valid UTF-8 JSON bytes should parse into Python values."""
    payload = decode_json_payload('[{"Давление": 1}]'.encode("utf-8"))

    assert payload == [{"Давление": 1}]


def test_decode_json_payload_rejects_malformed_json() -> None:
    """Malformed JSON should raise a decode error."""
    with pytest.raises(PayloadDecodeError, match="not valid JSON"):
        decode_json_payload(b"[{")


@pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
def test_decode_json_payload_rejects_non_standard_constants(token: str) -> None:
    """Non-standard JSON constants should raise a decode error."""
    with pytest.raises(PayloadDecodeError, match=token):
        decode_json_payload(f'[{{"a": {token}}}]'.encode("utf-8"))


def test_decode_json_payload_rejects_invalid_utf8() -> None:
    """Bytes that are not UTF-8 should raise a decode error."""
    with pytest.raises(PayloadDecodeError, match="utf-8"):
        decode_json_payload(b"\xff\xfe[]")


@pytest.mark.parametrize("filename", ["readings.json", "READINGS.JSON"])
def test_ensure_supported_upload_accepts_json(filename: str) -> None:
    """JSON file names should be accepted regardless of case."""
    ensure_supported_upload(filename)


@pytest.mark.parametrize("filename", ["readings.csv", "readings", ""])
def test_ensure_supported_upload_rejects_other_files(filename: str) -> None:
    """Non-JSON file names should be rejected."""
    with pytest.raises(UnsupportedUploadError):
        ensure_supported_upload(filename)


def test_read_source_bytes_reads_local_file(tmp_path: Path) -> None:
    """Local paths should be read as raw bytes."""
    source = tmp_path / "data.json"
    source.write_bytes(b'[{"a": 1}]')

    assert read_source_bytes(str(source), TagfeedConfig()) == b'[{"a": 1}]'


def test_read_source_bytes_raises_for_missing_file(tmp_path: Path) -> None:
    """Missing local paths should raise a source read error."""
    with pytest.raises(SourceReadError):
        read_source_bytes(str(tmp_path / "missing.json"), TagfeedConfig())


def test_read_source_bytes_rejects_s3_uri_without_key() -> None:
    """S3 URIs must name both bucket and key."""
    with pytest.raises(SourceReadError, match="s3://bucket/key"):
        read_source_bytes("s3://bucket-only", TagfeedConfig())


def test_read_source_bytes_reads_s3_object(monkeypatch: pytest.MonkeyPatch) -> None:
    """S3 URIs should be fetched through a boto3 session client."""
    calls: dict[str, object] = {}

    class _FakeClient:
        def get_object(self, Bucket: str, Key: str) -> dict[str, object]:
            calls["location"] = (Bucket, Key)
            return {"Body": io.BytesIO(b'[{"a": 1}]')}

    class _FakeSession:
        def __init__(self, **kwargs: str) -> None:
            calls["session_kwargs"] = kwargs

        def client(self, service_name: str) -> _FakeClient:
            return _FakeClient()

    fake_boto3 = types.SimpleNamespace(session=types.SimpleNamespace(Session=_FakeSession))
    monkeypatch.setitem(sys.modules, "boto3", fake_boto3)
    config = TagfeedConfig(s3_region="eu-west-1")

    body = read_source_bytes("s3://plant-data/runs/day1.json", config)

    assert body == b'[{"a": 1}]'
    assert calls["location"] == ("plant-data", "runs/day1.json")
    assert calls["session_kwargs"] == {"region_name": "eu-west-1"}
