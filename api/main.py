"""
FastAPI application for the personnel roster.

This module creates and configures the FastAPI application, registering
all routers, exception handlers and middleware.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import settings
from api.dependencies import engine, get_db
from api.routers import import_router, records
from api.schemas.common import ErrorResponse, HealthCheckResponse
from backend.models.schema import Base
from services.errors import (
    RosterError, NoFileError, EmptyInputError, InvalidWorkbookError,
    MissingCriteriaError, ImportFailedError, StorageError
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format=settings.LOG_FORMAT,
    handlers=[
        logging.FileHandler(settings.LOG_FILE),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger(__name__)

# HTTP status for each service error
ERROR_STATUS_CODES = {
    NoFileError: status.HTTP_400_BAD_REQUEST,
    EmptyInputError: status.HTTP_400_BAD_REQUEST,
    InvalidWorkbookError: status.HTTP_400_BAD_REQUEST,
    MissingCriteriaError: status.HTTP_400_BAD_REQUEST,
    ImportFailedError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    logger.info(f"Starting {settings.API_TITLE} v{settings.API_VERSION}")
    logger.info(f"Database: {settings.DATABASE_URL.split('@')[-1]}")  # Hide credentials

    # Ensure database tables exist
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables verified")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")

    # Ensure temp upload directory exists
    os.makedirs(settings.TEMP_UPLOAD_DIR, exist_ok=True)
    logger.info(f"Temp upload directory: {settings.TEMP_UPLOAD_DIR}")

    yield

    # Shutdown
    logger.info("Shutting down application")
    engine.dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS
)


# Exception handlers

@app.exception_handler(RosterError)
async def roster_error_handler(request: Request, exc: RosterError):
    """Translate service errors into error responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    detail = exc.detail
    if isinstance(exc, StorageError) and not settings.DEBUG:
        detail = None

    if status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.detail}")
    else:
        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=exc.message,
            detail=detail,
            path=str(request.url)
        ).model_dump(mode='json')
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors (404, upload checks) in the standard format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=str(exc.detail),
            path=str(request.url)
        ).model_dump(mode='json'),
        headers=getattr(exc, 'headers', None)
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            detail={"message": str(exc)} if settings.DEBUG else None,
            path=str(request.url)
        ).model_dump(mode='json')
    )


# Register routers with API prefix
app.include_router(import_router.router, prefix=settings.API_PREFIX)
app.include_router(records.router, prefix=settings.API_PREFIX)


# Root endpoints

@app.get('/', include_in_schema=False)
async def root():
    """
    Root endpoint - service banner.
    """
    return {
        'message': f'Welcome to {settings.API_TITLE}',
        'version': settings.API_VERSION,
        'docs': '/docs',
        'redoc': '/redoc',
        'openapi': '/openapi.json'
    }


@app.get('/health', response_model=HealthCheckResponse, tags=['health'])
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Checks connectivity to the database.

    **Example:**
    ```bash
    curl http://localhost:8000/health
    ```
    """
    health_status = {
        'status': 'healthy',
        'timestamp': datetime.utcnow(),
        'version': settings.API_VERSION,
        'database': 'unknown'
    }

    try:
        db.execute(text('SELECT 1'))
        health_status['database'] = 'connected'
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status['database'] = 'disconnected'
        health_status['status'] = 'unhealthy'

    return HealthCheckResponse(**health_status)


@app.get('/ping', tags=['health'])
async def ping():
    """
    Simple ping endpoint for load balancers.

    **Returns:**
    ```json
    {"ping": "pong"}
    ```
    """
    return {'ping': 'pong'}


# Middleware for request logging

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests."""
    logger.info(f"{request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"{request.method} {request.url.path} - {response.status_code}")
    return response


if __name__ == '__main__':
    import uvicorn

    uvicorn.run(
        'api.main:app',
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
