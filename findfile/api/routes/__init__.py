"""API route modules"""
from .query import router as query_router
from .events import router as events_router
from .setup import router as setup_router

__all__ = ["query_router", "events_router", "setup_router"]
