"""
Database configuration and setup for SQLAlchemy.

This module handles database connection management, session creation,
and the unit of work that bounds every service call.
"""

import sqlite3
from contextlib import contextmanager
from typing import Generator, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from hrapp.config.settings import settings


# Create SQLAlchemy engine
# For SQLite, we need check_same_thread=False to allow multiple threads
engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {},
    echo=settings.debug  # Log SQL queries when in debug mode
)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores REFERENCES clauses unless enabled per connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


# Entities stay readable after commit so they can be mirrored to the
# search index and mapped to DTOs without a reload.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

# Base class for all SQLAlchemy models
# All models will inherit from this base class
Base = declarative_base()


class UnitOfWork:
    """
    Explicit transaction boundary around a request-scoped session.

    Services open one unit per call: writes are committed when the block
    exits cleanly and rolled back when it raises. Read-only units are
    always rolled back so nothing they touch is ever flushed.
    """

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def begin(self, read_only: bool = False) -> Iterator[Session]:
        """
        Run a block of work inside a transaction.

        Args:
            read_only: Roll back instead of committing at the end

        Yields:
            Session: the session the repositories are bound to
        """
        try:
            yield self.session
        except Exception:
            self.session.rollback()
            raise
        if read_only:
            self.session.rollback()
        else:
            self.session.commit()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency function to get database session.

    This function creates a new database session for each request
    and ensures it's properly closed after the request completes.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """
    Create all database tables.

    This function creates all tables defined by SQLAlchemy models
    that inherit from Base. Used for initial database setup.
    """
    import hrapp.models  # noqa: F401  registers every model with Base.metadata
    Base.metadata.create_all(bind=engine)


def drop_tables():
    """
    Drop all database tables.

    This function drops all tables defined by SQLAlchemy models.
    Useful for testing or resetting the database.
    """
    import hrapp.models  # noqa: F401
    Base.metadata.drop_all(bind=engine)
