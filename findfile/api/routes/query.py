"""Spatial-text search endpoint"""
from fastapi import APIRouter, HTTPException, Depends, Request
import json
import logging
from ...errors import FindFileError
from ...models.response import QueryResponse
from ...services import QueryService
from ...api.dependencies import get_query_service
from ...api.auth_dependencies import require_security_key

logger = logging.getLogger(__name__)
router = APIRouter(tags=["query"])


@router.post("/query", response_model=QueryResponse)
async def query_files(
    request: Request,
    _: None = Depends(require_security_key),
    query_service: QueryService = Depends(get_query_service)
):
    """
    Find files containing text inside a page region
    
    The body is a search DSL value: ``{"search": {...}}`` or a Boolean
    combination under ``and``, ``or`` or ``not``. Matching file keys are
    returned grouped by bucket.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Error decoding query body: {e}")
        raise HTTPException(status_code=400, detail="error unmarshalling query")
    
    try:
        logger.info(f"Running query: {body}")
        data = await query_service.search(body)
        return QueryResponse(data=data)
    except FindFileError as e:
        logger.error(f"Error running query: {e}")
        raise
    except Exception as e:
        logger.error(f"Unexpected error running query: {e}")
        raise HTTPException(status_code=500, detail="error running query")
