"""
Pytest fixtures for the service layer and API tests.

Every test gets a fresh in-memory SQLite database and fresh in-memory
search indices.
"""
import os

# Must be set before hrapp.config.settings is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEARCH_BACKEND", "memory")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import hrapp.models  # noqa: F401  registers the tables
from hrapp.config.settings import Settings
from hrapp.core.database import Base
from hrapp.search.providers import InMemorySearchProvider
from hrapp.services.factory import ServiceFactory


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Session configured like the application's SessionLocal."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    with TestingSession() as db:
        yield db


@pytest.fixture
def search_provider():
    """In-memory search indices, one per entity."""
    return InMemorySearchProvider()


@pytest.fixture
def services(session, search_provider):
    """Service factory with the default (upsert) update behaviour."""
    return ServiceFactory(session, search_provider, Settings(update_requires_existing=False))


@pytest.fixture
def strict_services(session, search_provider):
    """Service factory whose update refuses unknown ids."""
    return ServiceFactory(session, search_provider, Settings(update_requires_existing=True))
