"""Database setup for SQLAlchemy sessions and engine."""
from __future__ import annotations

import logging

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import Settings

LOGGER = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine and session factory for the lifetime of the app."""

    def __init__(self, url: str) -> None:
        connect_args = {}
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        self.engine = create_engine(url, pool_pre_ping=True, future=True, connect_args=connect_args)
        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _sqlite_pragmas)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, future=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.DAYSCORE_DB_URL)

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        LOGGER.info("Disposing database engine")
        self.engine.dispose()


def _sqlite_pragmas(dbapi_connection, connection_record) -> None:  # noqa: ARG001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode = WAL")
    cursor.execute("PRAGMA busy_timeout = 5000")
    cursor.close()


def get_db(request: Request):
    database: Database = request.app.state.database
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
