"""Runtime configuration model for Tagfeed.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from core.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_STREAM_INTERVAL_SECONDS
from core.errors import TagfeedConfigError


@dataclass(frozen=True)
class TagfeedConfig:
    """Validated runtime configuration.

    Attributes:
        host: Bind host for the HTTP API.
        port: Bind port for the HTTP API.
        stream_interval_seconds: Delay between server-sent events.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    stream_interval_seconds: float = DEFAULT_STREAM_INTERVAL_SECONDS
    s3_region: str | None = None
    s3_profile: str | None = None

    @classmethod
    def from_env(cls) -> "TagfeedConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TagfeedConfigError: If environment values are invalid.
        """
        host = os.getenv("TAGFEED_HOST", DEFAULT_HOST)
        port = _parse_port(os.getenv("TAGFEED_PORT", str(DEFAULT_PORT)))
        interval = _parse_stream_interval(
            os.getenv("TAGFEED_STREAM_INTERVAL_SECONDS", str(DEFAULT_STREAM_INTERVAL_SECONDS))
        )
        return cls(
            host=host,
            port=port,
            stream_interval_seconds=interval,
            s3_region=os.getenv("TAGFEED_S3_REGION"),
            s3_profile=os.getenv("TAGFEED_S3_PROFILE"),
        )


def _parse_port(raw_value: str) -> int:
    """Parse the API port environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Port number in [1, 65535].

    Raises:
        TagfeedConfigError: If value is not an integer in range.
    """
    try:
        port = int(raw_value)
    except ValueError as error:
        raise TagfeedConfigError(
            "Invalid TAGFEED_PORT value: "
            f"expected integer, got '{raw_value}'. "
            "Set TAGFEED_PORT to a numeric value."
        ) from error
    if not 1 <= port <= 65535:
        raise TagfeedConfigError(
            f"Invalid TAGFEED_PORT value: {port} is outside 1-65535."
        )
    return port


def _parse_stream_interval(raw_value: str) -> float:
    """Parse the event stream interval environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Non-negative interval in seconds.

    Raises:
        TagfeedConfigError: If value is not a non-negative number.
    """
    try:
        interval = float(raw_value)
    except ValueError as error:
        raise TagfeedConfigError(
            "Invalid TAGFEED_STREAM_INTERVAL_SECONDS value: "
            f"expected number, got '{raw_value}'."
        ) from error
    if interval < 0 or not math.isfinite(interval):
        raise TagfeedConfigError(
            "Invalid TAGFEED_STREAM_INTERVAL_SECONDS value: "
            f"expected a finite non-negative number, got '{raw_value}'."
        )
    return interval
