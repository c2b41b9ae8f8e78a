"""Data models for the application"""
from .document import Document, Page, Line, Coordinates, Point
from .ocr import Block, BoundingBox, Relationship, PAGE_BLOCK, LINE_BLOCK
from .events import ChangeEvent, EventBatch, EventName, S3Record
from .search import SearchObject, Search, And, Or, Not, Node
from .response import QueryResponse, EventsResponse, MessageResponse, ErrorResponse

__all__ = [
    "Document",
    "Page",
    "Line",
    "Coordinates",
    "Point",
    "Block",
    "BoundingBox",
    "Relationship",
    "PAGE_BLOCK",
    "LINE_BLOCK",
    "ChangeEvent",
    "EventBatch",
    "EventName",
    "S3Record",
    "SearchObject",
    "Search",
    "And",
    "Or",
    "Not",
    "Node",
    "QueryResponse",
    "EventsResponse",
    "MessageResponse",
    "ErrorResponse",
]
