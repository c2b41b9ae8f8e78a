"""Request admission for protected routes"""
from fastapi import HTTPException, Request, status
import logging
from ..config import settings

logger = logging.getLogger(__name__)


async def require_security_key(request: Request) -> None:
    """
    Check the shared secret header when one is configured
    
    Args:
        request: Incoming request
        
    Raises:
        HTTPException: 400 if the header is missing or the key is wrong
    """
    if not settings.http_security_key:
        return
    
    header = settings.http_security_header
    received = request.headers.get(header)
    
    if received is None:
        logger.warning(f"Security key header '{header}' not provided")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"security key header '{header}' not provided"
        )
    
    if received != settings.http_security_key:
        logger.warning("Security key value incorrect")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="security key incorrect"
        )
