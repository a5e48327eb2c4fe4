"""JSON rendering helpers shared by the API and CLI."""

from __future__ import annotations

import math
from typing import Any


def json_safe(value: Any) -> Any:
    """Replace non-finite floats with None so payloads stay valid JSON.

    Args:
        value: Payload built from dicts, lists and scalars.

    Returns:
        Copy of the payload with NaN and infinities rendered as None.
    """
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [json_safe(item) for item in value]
    return value
