"""
Database configuration and session management.
"""

import logging
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("mealtracker.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given URL, with SQLite-specific connection options."""
    kwargs = {"echo": echo, "future": True}
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class Database:
    """
    Persistence handle owning one engine and its session factory.

    A Database is created by the application factory and passed explicitly
    to whatever needs a session (request dependency, scripts, tests).
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.url = database_url
        self.engine = build_engine(database_url, echo=echo)
        self.session_factory = sessionmaker(bind=self.engine, future=True)

    def init_database(self):
        """Initialize database schema"""
        # Import models so their tables are registered on Base.metadata
        from domain.models import team_member  # noqa: F401

        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def drop_all(self):
        """Drop every table (used by the seed script reset and tests)"""
        Base.metadata.drop_all(bind=self.engine)
        logger.info("Database tables dropped")

    def session(self) -> Session:
        return self.session_factory()

    def get_db_session(self) -> Generator[Session, None, None]:
        """Get database session (for FastAPI dependency injection)"""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self):
        self.engine.dispose()
