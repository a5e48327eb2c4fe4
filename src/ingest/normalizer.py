"""Tag/value record normalization.

This module validates a parsed JSON payload and coerces every tag value
into a float. Validation is all-or-nothing: the first violated rule
aborts the whole payload.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Callable

from core.errors import (
    EmptyInputError,
    InvalidElementError,
    InvalidShapeError,
    NoValidFieldsError,
)
from core.types import Record

# ASCII digits only.
_FLOAT_PREFIX = re.compile(
    r"[\s\ufeff]*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def normalize(raw_value: Any) -> list[Record]:
    """Validate and coerce a parsed payload into numeric records.

    Args:
        raw_value: Parsed JSON value, expected to be an array of objects.

    Returns:
        Normalized records in input order, keys in input order.

    Raises:
        InvalidShapeError: If the payload is not an array.
        EmptyInputError: If the array has no elements.
        InvalidElementError: If an element is not an object.
        NoValidFieldsError: If an element has no usable keys.
    """
    if not isinstance(raw_value, (list, tuple)):
        raise InvalidShapeError()
    if not raw_value:
        raise EmptyInputError()
    return [_normalize_element(index, element) for index, element in enumerate(raw_value)]


def coerce_value(value: Any) -> float:
    """Coerce one loosely-typed tag value into a float.

    Args:
        value: Raw JSON value.

    Returns:
        Numeric value; unsupported kinds map to 0.0.
    """
    for matches, convert in _COERCIONS:
        if matches(value):
            return convert(value)
    return 0.0


def parse_float_prefix(text: str) -> float:
    """Parse the leading floating-point literal of a string.

    Leading whitespace is skipped and trailing garbage is ignored, so
    ``" 42px"`` yields 42.0. Strings without a numeric prefix yield 0.0.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    literal = match.group(1)
    if literal.endswith("Infinity"):
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def _normalize_element(index: int, element: Any) -> Record:
    """Normalize one payload element.

    Args:
        index: Zero-based element position, used in errors.
        element: Raw element value.

    Returns:
        Normalized record.

    Raises:
        InvalidElementError: If the element is not a mapping.
        NoValidFieldsError: If no key survives normalization.
    """
    if not isinstance(element, Mapping):
        raise InvalidElementError(index)
    record: Record = {}
    for key, value in element.items():
        tag = key if isinstance(key, str) else str(key)
        if _is_blank(tag):
            continue
        record[tag] = coerce_value(value)
    if not record:
        raise NoValidFieldsError(index)
    return record


def _is_blank(tag: str) -> bool:
    """Return whether a key holds only whitespace or byte-order marks."""
    return all(char.isspace() or char == "\ufeff" for char in tag)


def _number_to_float(value: int | float) -> float:
    """Convert a JSON number to float, saturating oversized integers."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# Order matters: bool is an int subclass and must match before numbers.
_COERCIONS: tuple[tuple[Callable[[Any], bool], Callable[[Any], float]], ...] = (
    (lambda value: value is None, lambda value: 0.0),
    (lambda value: isinstance(value, bool), lambda value: 1.0 if value else 0.0),
    (_is_number, _number_to_float),
    (lambda value: isinstance(value, str), parse_float_prefix),
)
