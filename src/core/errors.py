"""Tagfeed exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class TagfeedError(Exception):
    """Base exception for all Tagfeed failures."""


class TagfeedConfigError(TagfeedError):
    """Raised for invalid runtime configuration."""


class TagfeedDependencyError(TagfeedError):
    """Raised when an optional runtime dependency is missing."""


class TagfeedIngestError(TagfeedError):
    """Raised for payload parsing and normalization failures."""


class InvalidShapeError(TagfeedIngestError):
    """Raised when the root payload is not an array."""

    def __init__(self) -> None:
        super().__init__("data must be an array of objects")


class EmptyInputError(TagfeedIngestError):
    """Raised when the root array holds no elements."""

    def __init__(self) -> None:
        super().__init__("data array must not be empty")


class InvalidElementError(TagfeedIngestError):
    """Raised when an array element is not an object."""

    def __init__(self, index: int) -> None:
        super().__init__(f"element at index {index} must be an object")
        self.index = index


class NoValidFieldsError(TagfeedIngestError):
    """Raised when an element normalizes to zero fields."""

    def __init__(self, index: int) -> None:
        super().__init__(f"element at index {index} contains no valid numeric fields")
        self.index = index


class PayloadDecodeError(TagfeedIngestError):
    """Raised when raw bytes are not UTF-8 encoded JSON."""


class UnsupportedUploadError(TagfeedIngestError):
    """Raised when an uploaded file is not a JSON document."""


class SourceReadError(TagfeedIngestError):
    """Raised when a local or S3 source cannot be read."""
