"""FastAPI application entry point"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
import logging
from . import __version__
from .config import settings
from .api.routes import query_router, events_router, setup_router
from .api.dependencies import get_document_store, reset_dependencies
from .db import MongoDB
from .errors import FindFileError
from .models.response import ErrorResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="FindFile API",
    description="Locate bucket images by text found inside page regions",
    version=__version__
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(query_router, prefix="/api")
app.include_router(events_router, prefix="/api")
app.include_router(setup_router, prefix="/api")


@app.exception_handler(FindFileError)
async def findfile_exception_handler(request: Request, exc: FindFileError):
    """Render domain errors with their generic kind"""
    body = ErrorResponse(error=exc.message, kind=exc.kind.value)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Render every other error as {"error": "<message>"}"""
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content=ErrorResponse(error="invalid request").model_dump(exclude_none=True))


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "FindFile API",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


@app.on_event("startup")
async def startup_event():
    """Startup tasks"""
    logger.info("Starting FindFile API")
    
    # Connect to MongoDB and ensure indexes
    await MongoDB.connect_db()
    await get_document_store().setup()
    logger.info("MongoDB connected successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Shutdown tasks"""
    logger.info("Shutting down FindFile API")
    
    await MongoDB.close_db()
    reset_dependencies()
    logger.info("MongoDB connection closed")


if __name__ == "__main__":
    import uvicorn
    import os
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        "findfile.main:app",
        host="0.0.0.0",
        port=port,
    )
