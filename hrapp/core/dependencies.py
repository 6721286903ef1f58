"""
FastAPI dependency injection functions.

This module provides dependency functions that can be injected into
FastAPI route handlers for database sessions, the search backend and
the entity services built on them.
"""

from typing import Generator
from sqlalchemy.orm import Session
from fastapi import Depends

from hrapp.config.settings import settings
from hrapp.core.database import get_db
from hrapp.search.providers import create_search_provider
from hrapp.services.factory import ServiceFactory


_search_provider = None


# Re-export database dependency
def get_database() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database session.

    Yields:
        Session: SQLAlchemy database session
    """
    yield from get_db()


def get_search_provider():
    """
    FastAPI dependency for the search backend.

    Returns:
        The process-wide provider selected by ``settings.search_backend``
    """
    global _search_provider
    if _search_provider is None:
        _search_provider = create_search_provider(settings)
    return _search_provider


def get_services(
    db: Session = Depends(get_database),
    search_provider=Depends(get_search_provider),
) -> ServiceFactory:
    """
    FastAPI dependency for the request's service factory.

    Returns:
        ServiceFactory: builds entity services over the request session
    """
    return ServiceFactory(db, search_provider, settings)
