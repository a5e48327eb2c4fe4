"""FastAPI application for dataset upload and playback.

This module exposes the dataset service over HTTP, including a
server-sent-events stream that replays records on a fixed cadence.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, AsyncIterator, Optional

from fastapi import Body, FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse

from api.example_payload import build_example_document
from core.config import TagfeedConfig
from core.constants import DIRECT_UPLOAD_LABEL, EVENT_STREAM_MEDIA_TYPE
from core.logging_config import get_logger
from core.serialization import json_safe
from core.types import IngestResult, Record
from store.dataset_service import DatasetService

_LOGGER = get_logger(__name__)


def create_app(
    service: DatasetService | None = None,
    config: TagfeedConfig | None = None,
) -> FastAPI:
    """Build the HTTP application around one dataset service.

    Args:
        service: Service owning the dataset; a sample-seeded one is created
            when omitted.
        config: Runtime configuration; read from the environment if omitted.

    Returns:
        Configured FastAPI application.
    """
    service = service or DatasetService()
    config = config or TagfeedConfig.from_env()
    app = FastAPI(title="Tagfeed API")
    app.state.service = service

    @app.post("/data/upload")
    async def upload_file(file: Optional[UploadFile] = File(None)):
        if file is None:
            raise HTTPException(status_code=400, detail="No file uploaded")
        raw_bytes = await file.read()
        result = service.ingest_upload(raw_bytes, file.filename or "")
        return _ingest_response(result)

    @app.post("/data/upload-json")
    async def upload_json(body: Any = Body(...)):
        _LOGGER.info("dataset_body_received")
        result = service.ingest_from_value(body, DIRECT_UPLOAD_LABEL)
        return _ingest_response(result)

    @app.get("/data/info")
    async def data_info():
        return json_safe(service.get_info().to_payload())

    @app.get("/data/all")
    async def all_data():
        return json_safe(
            {"data": service.get_all(), "info": service.get_info().to_payload()}
        )

    @app.post("/data/reset")
    async def reset_data():
        info = service.reset_cursor()
        return json_safe({"message": "Data index reset", "info": info.to_payload()})

    @app.get("/data/next")
    async def next_record():
        return json_safe({"record": service.get_next()})

    @app.get("/data/records/{index}")
    async def record_by_index(index: int):
        record = service.get_by_index(index)
        if record is None:
            raise HTTPException(status_code=404, detail=f"No record at index {index}")
        return json_safe({"record": record})

    @app.get("/data/example")
    async def example_structure():
        return build_example_document()

    @app.get("/sse/stream")
    async def stream_records(limit: Optional[int] = Query(None, ge=1)):
        events = _record_events(service, config.stream_interval_seconds, limit)
        return StreamingResponse(events, media_type=EVENT_STREAM_MEDIA_TYPE)

    return app


def _ingest_response(result: IngestResult) -> dict[str, Any]:
    if not result.success:
        raise HTTPException(status_code=400, detail=result.message)
    return json_safe(result.to_payload())


async def _record_events(
    service: DatasetService,
    interval_seconds: float,
    limit: int | None,
) -> AsyncIterator[str]:
    """Yield server-sent events pulled from the round-robin cursor.

    Args:
        service: Dataset service to pull records from.
        interval_seconds: Delay between consecutive events.
        limit: Optional number of events after which the stream ends.
    """
    sent = 0
    while limit is None or sent < limit:
        if sent:
            await asyncio.sleep(interval_seconds)
        yield format_record_event(service.get_next())
        sent += 1


def format_record_event(record: Record | None) -> str:
    """Render one record as a server-sent event frame.

    Args:
        record: Record to publish, or None when no data is loaded.

    Returns:
        Event frame terminated by a blank line.
    """
    if record is None:
        return "event: empty\ndata: null\n\n"
    return f"data: {json.dumps(json_safe(record))}\n\n"
