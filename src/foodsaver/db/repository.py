"""SQLite engine and session lifecycle for the FoodSaver store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from foodsaver.config import get_settings
from foodsaver.db.models import Base

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:  # noqa: ARG001
    # SQLite leaves FK enforcement off per connection; cascades on users rely on it.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(db_path: Path) -> Engine:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{db_path}", future=True)
    event.listen(engine, "connect", _enable_foreign_keys)
    # create_all checks for each table first, so repeated startups are no-ops.
    Base.metadata.create_all(engine)
    logger.debug("Database ready path=%s tables=%s", db_path, len(Base.metadata.tables))
    return engine


def get_engine(database_path: Path | None = None) -> Engine:
    """Return the process-wide engine, creating the schema on first use."""
    global _engine, _session_factory

    if _engine is None:
        _engine = _build_engine(database_path or get_settings().database_path)
        _session_factory = sessionmaker(bind=_engine, autoflush=False, future=True)
    return _engine


def get_session() -> Session:
    if _session_factory is None:
        get_engine()
    assert _session_factory is not None
    return _session_factory()


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    """Yield a session that commits on success and rolls back on any error."""

    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def reset_repository_state() -> None:
    """Dispose the engine so the next call re-reads settings (used by tests)."""

    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


__all__ = ["get_engine", "get_session", "reset_repository_state", "session_scope"]
