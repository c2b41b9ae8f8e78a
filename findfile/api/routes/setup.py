"""Document store setup endpoint"""
from fastapi import APIRouter, Depends
import logging
from ...db import DocumentStore
from ...errors import FindFileError
from ...models.response import MessageResponse
from ...api.dependencies import get_document_store
from ...api.auth_dependencies import require_security_key

logger = logging.getLogger(__name__)
router = APIRouter(tags=["setup"])


@router.post("/setup", response_model=MessageResponse)
async def setup_store(
    _: None = Depends(require_security_key),
    document_store: DocumentStore = Depends(get_document_store)
):
    """Create the document store's indexes (idempotent)"""
    try:
        await document_store.setup()
        return MessageResponse()
    except FindFileError as e:
        logger.error(f"Error setting up document store: {e}")
        raise
