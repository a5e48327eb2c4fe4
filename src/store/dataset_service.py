"""Dataset service facade.

This module exposes ingestion and playback operations to the HTTP API,
the CLI, and SDK users. Ingestion failures come back as descriptive
results and never touch the current dataset.
"""

from __future__ import annotations

from typing import Any

from core.constants import DEFAULT_SOURCE_LABEL, DIRECT_UPLOAD_LABEL
from core.errors import TagfeedIngestError
from core.logging_config import get_logger
from core.types import DatasetInfo, IngestResult, Record
from ingest.normalizer import normalize
from ingest.payload_reader import decode_json_payload, ensure_supported_upload
from ingest.sample_data import generate_sample_records
from store.dataset_store import DatasetStore

_LOGGER = get_logger(__name__)


class DatasetService:
    """Primary entry point for dataset ingestion and playback."""

    def __init__(self, store: DatasetStore | None = None) -> None:
        """Create the service.

        Args:
            store: Optional store to own; a store seeded with the built-in
                sample is created when omitted.
        """
        if store is None:
            store = DatasetStore(generate_sample_records(), DEFAULT_SOURCE_LABEL)
            _LOGGER.info("dataset_sample_loaded", total_rows=len(store))
        self._store = store

    @property
    def store(self) -> DatasetStore:
        """Return the owned dataset store."""
        return self._store

    def ingest_upload(self, raw_bytes: bytes, filename: str) -> IngestResult:
        """Ingest an uploaded JSON file.

        Args:
            raw_bytes: File contents.
            filename: Client-supplied file name, used as source label.

        Returns:
            Ingestion outcome.
        """
        _LOGGER.info("dataset_upload_received", filename=filename, size_bytes=len(raw_bytes))
        try:
            ensure_supported_upload(filename)
        except TagfeedIngestError as error:
            return self._failure(filename, error)
        return self.ingest_from_bytes(raw_bytes, filename)

    def ingest_from_bytes(self, raw_bytes: bytes, label: str) -> IngestResult:
        """Decode UTF-8 JSON bytes and ingest the parsed value.

        Args:
            raw_bytes: Encoded JSON payload.
            label: Source label for the new dataset.

        Returns:
            Ingestion outcome; decode failures leave the store untouched.
        """
        try:
            value = decode_json_payload(raw_bytes)
        except TagfeedIngestError as error:
            return self._failure(label, error)
        return self.ingest_from_value(value, label)

    def ingest_from_value(self, value: Any, label: str = DIRECT_UPLOAD_LABEL) -> IngestResult:
        """Normalize an already-parsed payload and replace the dataset.

        Args:
            value: Parsed JSON value.
            label: Source label for the new dataset.

        Returns:
            Ingestion outcome with the new dataset summary on success.
        """
        _LOGGER.info("dataset_ingest_started", source_label=label)
        try:
            records = normalize(value)
        except TagfeedIngestError as error:
            return self._failure(label, error)
        self._store.replace(records, label)
        info = self._store.info()
        _LOGGER.info(
            "dataset_replaced",
            source_label=label,
            total_rows=info.total_rows,
            column_count=len(info.columns),
        )
        return IngestResult(
            success=True,
            message=f"Data from {label} processed successfully",
            info=info,
        )

    def get_info(self) -> DatasetInfo:
        """Return the current dataset summary."""
        return self._store.info()

    def get_all(self) -> list[Record]:
        """Return copies of every stored record."""
        return self._store.all()

    def reset_cursor(self) -> DatasetInfo:
        """Rewind playback to the first record.

        Returns:
            Dataset summary after the rewind.
        """
        self._store.reset_cursor()
        _LOGGER.info("dataset_cursor_reset", source_label=self._store.source_label)
        return self._store.info()

    def get_next(self) -> Record | None:
        """Return the next record in round-robin order, or None if empty."""
        return self._store.next()

    def get_by_index(self, index: int) -> Record | None:
        """Return the record at ``index``, or None if out of range."""
        return self._store.by_index(index)

    def _failure(self, label: str, error: TagfeedIngestError) -> IngestResult:
        _LOGGER.error(
            "dataset_ingest_failed",
            source_label=label,
            error_type=type(error).__name__,
            error=str(error),
        )
        return IngestResult(
            success=False,
            message=f"Failed to process data: {error}",
            error=error,
        )
