"""Unit tests for the round-robin dataset store."""

from __future__ import annotations

from core.constants import DEFAULT_SOURCE_LABEL
from store.dataset_store import DatasetStore


def _records(count: int) -> list[dict[str, float]]:
    return [{"tag": float(i)} for i in range(count)]


def test_replace_resets_cursor_and_label() -> None:
    """Replacement should swap records, label and rewind the cursor."""
    store = DatasetStore(_records(3))
    store.next()
    store.next()

    store.replace(_records(5), "upload.json")
    info = store.info()

    assert (info.total_rows, info.current_index, info.source_label) == (5, 0, "upload.json")


def test_next_cycles_through_records_in_order() -> None:
    """N calls should visit every record once and call N+1 should wrap."""
    records = _records(4)
    store = DatasetStore(records)

    served = [store.next() for _ in range(5)]

    assert served[:4] == records and served[4] == records[0]


def test_next_on_empty_store_returns_none() -> None:
    """Empty stores should return None and keep the cursor at zero."""
    store = DatasetStore()

    assert store.next() is None and store.next() is None
    assert store.current_index == 0


def test_reset_cursor_keeps_records_and_label() -> None:
    """Rewinding should only move the cursor."""
    store = DatasetStore(_records(3), "run-7.json")
    store.next()
    store.next()

    store.reset_cursor()

    assert store.next() == {"tag": 0.0} and store.source_label == "run-7.json"


def test_by_index_is_bounds_checked() -> None:
    """Out-of-range indexes, including negatives, should return None."""
    store = DatasetStore(_records(2))

    assert store.by_index(-1) is None and store.by_index(2) is None
    assert store.by_index(1) == {"tag": 1.0}


def test_by_index_does_not_move_cursor() -> None:
    """Direct access should not advance round-robin playback."""
    store = DatasetStore(_records(3))

    store.by_index(2)

    assert store.next() == {"tag": 0.0}


def test_info_reports_first_record_columns_and_sample() -> None:
    """Columns and sample row should come from the first record only."""
    store = DatasetStore([{"a": 1.0, "b": 0.0}, {"a": 2.5, "c": 1.0}])

    info = store.info()

    assert info.columns == ("a", "b") and info.sample_row == {"a": 1.0, "b": 0.0}


def test_info_on_empty_store_has_no_sample_row() -> None:
    """Empty stores should report no columns, no sample and the sentinel label."""
    info = DatasetStore().info()

    assert (info.total_rows, info.columns, info.sample_row, info.source_label) == (
        0,
        (),
        None,
        DEFAULT_SOURCE_LABEL,
    )


def test_info_does_not_mutate_cursor() -> None:
    """Inspection should be read-only."""
    store = DatasetStore(_records(3))
    store.next()

    store.info()
    store.all()

    assert store.current_index == 1


def test_all_returns_defensive_copy() -> None:
    """Mutating returned records should not affect stored records."""
    store = DatasetStore(_records(2))

    snapshot = store.all()
    snapshot[0]["tag"] = 99.0
    snapshot.append({"tag": 5.0})

    assert store.all() == _records(2)


def test_stored_records_are_isolated_from_caller_input() -> None:
    """Mutating the list passed to replace should not affect stored records."""
    records = _records(2)
    store = DatasetStore()
    store.replace(records, "input.json")

    records[0]["tag"] = -1.0
    served = store.next()
    served["tag"] = -2.0

    assert store.by_index(0) == {"tag": 0.0}
