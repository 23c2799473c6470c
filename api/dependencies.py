"""
Dependency injection utilities for FastAPI.

This module provides reusable dependencies for database sessions,
roster services and upload checks.
"""

import logging
from pathlib import Path
from typing import Callable, Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from fastapi import Depends, HTTPException, status

from api.config import settings
from services.roster_import_service import RosterImportService
from services.roster_query_service import RosterQueryService

logger = logging.getLogger(__name__)

# Create database engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_pre_ping=settings.DB_POOL_PRE_PING,
    echo=settings.DEBUG
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Get database session dependency.

    Yields database session and ensures it's closed after use.

    Usage:
        @app.get("/endpoint")
        def endpoint(db: Session = Depends(get_db)):
            # Use db session
            pass
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory() -> Callable[[], Session]:
    """
    Get the session factory used by imports.

    Imports run in their own session, separate from the request session.
    """
    return SessionLocal


def get_import_service(
    session_factory: Callable[[], Session] = Depends(get_session_factory)
) -> RosterImportService:
    """Build the roster import service."""
    return RosterImportService(session_factory)


def get_query_service(db: Session = Depends(get_db)) -> RosterQueryService:
    """Build the roster query service on the request session."""
    return RosterQueryService(db)


def verify_file_size(file_size: int) -> bool:
    """
    Verify uploaded file size is within limit.

    Args:
        file_size: File size in bytes

    Returns:
        True if size is acceptable

    Raises:
        HTTPException: If file is too large
    """
    max_size_bytes = settings.MAX_FILE_SIZE_MB * 1024 * 1024

    if file_size > max_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size ({file_size / 1024 / 1024:.1f} MB) exceeds maximum allowed "
                   f"({settings.MAX_FILE_SIZE_MB} MB)"
        )

    return True


def verify_file_extension(filename: str) -> bool:
    """
    Verify file has allowed extension.

    Args:
        filename: Name of uploaded file

    Returns:
        True if extension is allowed

    Raises:
        HTTPException: If extension is not allowed
    """
    ext = Path(filename).suffix.lower()

    if ext not in [e.lower() for e in settings.ALLOWED_EXTENSIONS]:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File extension '{ext}' not allowed. "
                   f"Allowed extensions: {', '.join(settings.ALLOWED_EXTENSIONS)}"
        )

    return True
