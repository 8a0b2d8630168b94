import logging
import sqlite3
from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign keys for SQLite."""
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Handle to the transaction/budget store.

    One instance is created per application and passed to request handlers
    through app.state; every request gets its own Session from it.
    """

    def __init__(self, url: str):
        self.url = url
        kwargs: dict = {"echo": False}
        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # Share one connection so every session sees the same in-memory DB
                kwargs["poolclass"] = StaticPool
        self.engine: Engine = create_engine(url, **kwargs)
        self.session_factory = sessionmaker(bind=self.engine)

    def create_all(self) -> None:
        """Create tables if they don't exist."""
        Base.metadata.create_all(self.engine)
        logger.info("Ledger schema ready at %s", self.engine.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        """Get a new database session."""
        return self.session_factory()

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()


def get_db(request: Request):
    """FastAPI dependency for database sessions."""
    database: Database = request.app.state.database
    session = database.session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
