"""Public SDK surface for Tagfeed.

This module provides a stable import path for library users.
It re-exports the dataset service, store, and typed models.
"""

from __future__ import annotations

from api.app import create_app
from core.config import TagfeedConfig
from core.errors import (
    EmptyInputError,
    InvalidElementError,
    InvalidShapeError,
    NoValidFieldsError,
    PayloadDecodeError,
    TagfeedError,
    TagfeedIngestError,
)
from core.types import DatasetInfo, IngestResult, Record
from ingest.normalizer import normalize
from ingest.sample_data import generate_sample_records
from store.dataset_service import DatasetService
from store.dataset_store import DatasetStore

__all__ = [
    "DatasetInfo",
    "DatasetService",
    "DatasetStore",
    "EmptyInputError",
    "IngestResult",
    "InvalidElementError",
    "InvalidShapeError",
    "NoValidFieldsError",
    "PayloadDecodeError",
    "Record",
    "TagfeedConfig",
    "TagfeedError",
    "TagfeedIngestError",
    "create_app",
    "generate_sample_records",
    "normalize",
]
