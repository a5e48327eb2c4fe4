"""Round-robin dataset store.

This module keeps the single current dataset in memory together with
its source label and a wrap-around cursor. Replacement is wholesale:
records, label and cursor change under one lock acquisition.
"""

from __future__ import annotations

import threading
from typing import Iterable

from core.constants import DEFAULT_SOURCE_LABEL
from core.types import DatasetInfo, Record


class DatasetStore:
    """Mutable holder of the current dataset and its cursor.

    Records handed in and out are copied, so callers can never mutate
    the stored sequence.
    """

    def __init__(
        self,
        records: Iterable[Record] = (),
        source_label: str = DEFAULT_SOURCE_LABEL,
    ) -> None:
        """Create a store.

        Args:
            records: Initial normalized records.
            source_label: Origin label for the initial records.
        """
        self._lock = threading.Lock()
        self._records: tuple[Record, ...] = tuple(dict(record) for record in records)
        self._source_label = source_label
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._records)

    @property
    def source_label(self) -> str:
        """Return the origin label of the current records."""
        return self._source_label

    @property
    def current_index(self) -> int:
        """Return the position of the next record to serve."""
        return self._cursor

    def replace(self, records: Iterable[Record], source_label: str) -> None:
        """Swap in a new dataset and rewind the cursor.

        Args:
            records: Already-normalized records.
            source_label: Origin label for the new records.
        """
        frozen = tuple(dict(record) for record in records)
        with self._lock:
            self._records = frozen
            self._source_label = source_label
            self._cursor = 0

    def next(self) -> Record | None:
        """Return the record under the cursor and advance it.

        Returns:
            Copy of the current record, or None when the store is empty.
        """
        with self._lock:
            if not self._records:
                return None
            record = self._records[self._cursor]
            self._cursor = (self._cursor + 1) % len(self._records)
        return dict(record)

    def reset_cursor(self) -> None:
        """Rewind the cursor to the first record."""
        with self._lock:
            self._cursor = 0

    def by_index(self, index: int) -> Record | None:
        """Return a copy of the record at ``index`` or None if out of range."""
        with self._lock:
            if index < 0 or index >= len(self._records):
                return None
            return dict(self._records[index])

    def all(self) -> list[Record]:
        """Return copies of every stored record in order."""
        with self._lock:
            records = self._records
        return [dict(record) for record in records]

    def info(self) -> DatasetInfo:
        """Summarize the current dataset without touching the cursor.

        Returns:
            Row count, cursor, label, first-record columns and sample row.
        """
        with self._lock:
            records = self._records
            cursor = self._cursor
            source_label = self._source_label
        first = records[0] if records else None
        return DatasetInfo(
            total_rows=len(records),
            current_index=cursor,
            source_label=source_label,
            columns=tuple(first) if first is not None else (),
            sample_row=dict(first) if first is not None else None,
        )
