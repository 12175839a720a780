"""Database engine and session management."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fridgeshare.db.models import Base

logger = logging.getLogger(__name__)


def _prepare_sqlite_connection(dbapi_connection, connection_record) -> None:  # noqa: ARG001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Let SQLAlchemy emit BEGIN itself so SAVEPOINTs nest inside the transaction.
    dbapi_connection.isolation_level = None


def _begin_sqlite_transaction(connection) -> None:
    connection.exec_driver_sql("BEGIN")


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``, preparing SQLite files when needed."""

    url = make_url(database_url)
    kwargs: dict[str, object] = {"future": True, "echo": False}

    if url.get_backend_name() == "sqlite":
        # Endpoints run in FastAPI's threadpool, so connections cross threads.
        kwargs["connect_args"] = {"check_same_thread": False}
        if not url.database or url.database == ":memory:":
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(url, **kwargs)
    if url.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _prepare_sqlite_connection)
        event.listen(engine, "begin", _begin_sqlite_transaction)
    return engine


class Database:
    """Engine plus session factory owned by one application instance.

    Handlers receive sessions from this object through request-scoped
    dependencies; nothing in the package keeps a module-level engine.
    """

    def __init__(self, database_url: str):
        self.url = database_url
        self.engine = build_engine(database_url)
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    def create_schema(self) -> None:
        Base.metadata.create_all(self.engine)
        logger.debug("Database schema ensured at %s", self.engine.url.render_as_string())

    def session(self) -> Session:
        """Return a new SQLAlchemy session."""

        return self._session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """Context manager yielding a session with automatic commit/rollback."""

        session = self.session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()


__all__ = ["Database", "build_engine"]
