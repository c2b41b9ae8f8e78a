"""API request and response models"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class QueryResponse(BaseModel):
    """Files matching a search, grouped by bucket"""
    message: str = "success"
    data: Dict[str, List[str]] = Field(default_factory=dict)


class EventsResponse(BaseModel):
    """Outcome of an indexing batch"""
    message: str = "success"
    upserted: int = 0
    deleted: int = 0


class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    message: str = "success"


class ErrorResponse(BaseModel):
    """Error body returned for any failed request; ``kind`` is set for domain errors"""
    error: str
    kind: Optional[str] = None
