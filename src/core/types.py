"""Shared typed models.

This module defines the record alias and immutable result models used by
the ingest, store, API, and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.errors import TagfeedIngestError

Record = dict[str, float]


@dataclass(frozen=True)
class DatasetInfo:
    """Read-only summary of the current dataset.

    Attributes:
        total_rows: Number of stored records.
        current_index: Cursor position of the next record to serve.
        source_label: Origin of the records (file name or fixed label).
        columns: Tag names of the first record, in ingestion order.
        sample_row: Copy of the first record, or None when empty.
    """

    total_rows: int
    current_index: int
    source_label: str
    columns: tuple[str, ...] = ()
    sample_row: Record | None = None

    def to_payload(self) -> dict[str, object]:
        """Render the summary as a JSON-safe wire payload."""
        payload: dict[str, object] = {
            "totalRows": self.total_rows,
            "currentIndex": self.current_index,
            "sourceLabel": self.source_label,
            "columns": list(self.columns),
        }
        if self.sample_row is not None:
            payload["sampleRow"] = dict(self.sample_row)
        return payload


@dataclass(frozen=True)
class IngestResult:
    """Outcome of one ingestion attempt.

    Attributes:
        success: Whether the dataset was replaced.
        message: Human-readable outcome description.
        info: Summary of the replaced dataset on success.
        error: Failure that aborted ingestion, if any.
    """

    success: bool
    message: str
    info: DatasetInfo | None = None
    error: TagfeedIngestError | None = field(default=None, compare=False)

    def to_payload(self) -> dict[str, object]:
        """Render the outcome as a JSON-safe wire payload."""
        payload: dict[str, object] = {"success": self.success, "message": self.message}
        if self.info is not None:
            payload["dataInfo"] = self.info.to_payload()
        return payload
