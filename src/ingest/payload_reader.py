"""Raw payload readers for ingestion.

This module decodes uploaded bytes into parsed JSON values and loads
source bytes from local paths or S3 objects for the CLI.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.config import TagfeedConfig
from core.constants import PAYLOAD_ENCODING, SUPPORTED_UPLOAD_EXTENSIONS
from core.errors import (
    PayloadDecodeError,
    SourceReadError,
    TagfeedDependencyError,
    UnsupportedUploadError,
)
from core.s3_uri import is_s3_uri, parse_s3_uri


def decode_json_payload(raw_bytes: bytes) -> Any:
    """Decode UTF-8 bytes and parse them as JSON.

    Args:
        raw_bytes: Uploaded file or request body bytes.

    Returns:
        Parsed JSON value.

    Raises:
        PayloadDecodeError: If bytes are not UTF-8 or not valid JSON.
    """
    try:
        text = raw_bytes.decode(PAYLOAD_ENCODING)
    except UnicodeDecodeError as error:
        raise PayloadDecodeError(
            f"Payload is not valid {PAYLOAD_ENCODING} text: {error.reason} "
            f"at byte {error.start}."
        ) from error
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise PayloadDecodeError(
            f"Payload is not valid JSON: {error.msg} "
            f"(line {error.lineno}, column {error.colno})."
        ) from error


def ensure_supported_upload(filename: str) -> None:
    """Validate that an uploaded file name has a JSON extension.

    Args:
        filename: Client-supplied file name.

    Raises:
        UnsupportedUploadError: If the extension is not supported.
    """
    if not filename.lower().endswith(SUPPORTED_UPLOAD_EXTENSIONS):
        raise UnsupportedUploadError(
            f"File '{filename}' must be a JSON document "
            f"(supported extensions: {', '.join(SUPPORTED_UPLOAD_EXTENSIONS)})."
        )


def read_source_bytes(source_uri: str, config: TagfeedConfig) -> bytes:
    """Load raw bytes from a local file or an S3 object.

    Args:
        source_uri: Local path or ``s3://bucket/key`` URI.
        config: Runtime configuration for S3 session defaults.

    Returns:
        Raw source bytes.

    Raises:
        SourceReadError: If the source cannot be read.
        TagfeedDependencyError: If S3 is requested without boto3.
    """
    if is_s3_uri(source_uri):
        return _read_s3_bytes(source_uri, config)
    return _read_local_bytes(Path(source_uri).expanduser())


def _read_local_bytes(source_path: Path) -> bytes:
    if not source_path.is_file():
        raise SourceReadError(
            f"Failed to read source at {source_path}: file does not exist. "
            "Provide an existing JSON file."
        )
    try:
        return source_path.read_bytes()
    except OSError as error:
        raise SourceReadError(f"Failed to read source at {source_path}: {error}") from error


def _read_s3_bytes(source_uri: str, config: TagfeedConfig) -> bytes:
    """Download one S3 object body.

    Args:
        source_uri: S3 object URI.
        config: Runtime configuration for region/profile.

    Returns:
        Object body bytes.

    Raises:
        SourceReadError: If the object cannot be fetched.
    """
    location = parse_s3_uri(source_uri)
    s3_client = _create_s3_client(config)
    try:
        response = s3_client.get_object(Bucket=location.bucket, Key=location.key)
    except Exception as error:
        raise SourceReadError(f"Failed to read {source_uri}: {error}") from error
    return response["Body"].read()


def _create_s3_client(config: TagfeedConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        TagfeedDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise TagfeedDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install tagfeed[s3] to read s3:// sources."
        ) from error
    session = boto3.session.Session(**_build_boto3_session_kwargs(config))
    return session.client("s3")


def _build_boto3_session_kwargs(config: TagfeedConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs


def _reject_constant(token: str) -> Any:
    """Refuse the non-standard ``NaN`` and ``Infinity`` JSON tokens."""
    raise PayloadDecodeError(f"Payload is not valid JSON: unsupported constant '{token}'.")
