"""Core constants used across Tagfeed modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_SOURCE_LABEL = "default"
DIRECT_UPLOAD_LABEL = "direct-upload"
SUPPORTED_UPLOAD_EXTENSIONS = (".json",)
PAYLOAD_ENCODING = "utf-8"
SAMPLE_RECORD_COUNT = 20
SAMPLE_TAG_PREFIX = "DC_out_100ms"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_STREAM_INTERVAL_SECONDS = 1.0
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"
