"""Unit tests for the public SDK surface."""

from __future__ import annotations

import tagfeed


def test_sdk_exports_service_and_pipeline() -> None:
    """SDK users should ingest and replay through the public module."""
    service = tagfeed.DatasetService(tagfeed.DatasetStore())

    result = service.ingest_from_value([{"a": True}], "sdk")

    assert result.success and service.get_next() == {"a": 1.0}
    assert tagfeed.normalize([{"b": None}]) == [{"b": 0.0}]
