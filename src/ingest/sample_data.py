"""Built-in sample dataset.

This module generates the deterministic tag/value records served
before any dataset has been uploaded.
"""

from __future__ import annotations

from core.constants import SAMPLE_RECORD_COUNT, SAMPLE_TAG_PREFIX
from core.types import Record


def generate_sample_records(count: int = SAMPLE_RECORD_COUNT) -> list[Record]:
    """Generate synthetic instrument readings.

    Channel ``[141].8`` is zeroed on every third row to mimic nulls that
    were coerced during ingestion.

    Args:
        count: Number of records to generate.

    Returns:
        Records sharing one fixed 14-tag schema.
    """
    return [_sample_record(i) for i in range(count)]


def _sample_record(i: int) -> Record:
    values = {
        "[140].10": 0.5 + i * 0.1,
        "[140].13": 1.2 + i * 0.05,
        "[140].14": 10 + i * 2,
        "[140].8": 95 - i * 0.5,
        "[140].9": 60 + i * 1,
        "[141].10": 120 + i * 3,
        "[141].13": 15 + i * 0.8,
        "[141].8": 0 if i % 3 == 0 else 25 + i,
        "[141].9": 20 + i * 1.5,
        "[144]": i % 2,
        "[146]": 1,
        "[148]": 15 + i * 0.7,
        "[164]": 25 + i * 1.2,
        "[165]": 8 + i * 0.5,
    }
    return {f"{SAMPLE_TAG_PREFIX}{suffix}": float(value) for suffix, value in values.items()}
