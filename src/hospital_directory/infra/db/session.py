from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from hospital_directory.infra.db.config import (
    database_url,
    max_overflow,
    pool_recycle_seconds,
    pool_size,
)

# Built on first use so importing the app never needs DATABASE_URL
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def engine_options() -> dict[str, Any]:
    """Pool settings from DB_POOL_SIZE, DB_MAX_OVERFLOW and DB_POOL_RECYCLE."""
    return {
        "pool_size": pool_size(),
        "max_overflow": max_overflow(),
        "pool_recycle": pool_recycle_seconds(),
        "pool_pre_ping": True,
    }


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(database_url(), **engine_options())
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        # Rows stay readable after commit; repositories map them to domain objects late.
        _session_factory = sessionmaker(bind=get_engine(), class_=Session, expire_on_commit=False)
    return _session_factory


@contextmanager
def get_session() -> Iterator[Session]:
    """
    One unit of work: commit when the block exits cleanly, roll back and
    re-raise otherwise, close in every case.
    """
    session = get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
