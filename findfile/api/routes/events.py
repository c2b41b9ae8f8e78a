"""Object-store change event ingestion endpoint"""
from fastapi import APIRouter, HTTPException, Depends, Request
from pydantic import ValidationError
import json
import logging
from ...errors import FindFileError
from ...models.events import EventBatch
from ...models.response import EventsResponse
from ...services import IndexingPipeline
from ...api.dependencies import get_indexing_pipeline
from ...api.auth_dependencies import require_security_key

logger = logging.getLogger(__name__)
router = APIRouter(tags=["events"])


@router.post("/events", response_model=EventsResponse)
async def ingest_events(
    request: Request,
    _: None = Depends(require_security_key),
    pipeline: IndexingPipeline = Depends(get_indexing_pipeline)
):
    """
    Index a batch of change events
    
    Accepts ``{"events": [{"event_name", "bucket", "key"}, ...]}`` or an S3
    notification payload with ``Records``.
    """
    try:
        payload = await request.json()
        if not isinstance(payload, dict):
            raise ValueError("event payload must be a json object")
        batch = EventBatch.from_payload(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError, ValueError) as e:
        logger.error(f"Error decoding event batch: {e}")
        raise HTTPException(status_code=400, detail="error unmarshalling events")
    
    try:
        result = await pipeline.process(batch.events)
        return EventsResponse(upserted=result.upserted, deleted=result.deleted)
    except FindFileError as e:
        logger.error(f"Error processing events: {e}")
        raise
    except Exception as e:
        logger.error(f"Unexpected error processing events: {e}")
        raise HTTPException(status_code=500, detail="error processing events")
