"""Engine, read sessions and transaction scopes for the users database."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Iterator

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from user_api.core.config import get_settings

Base = declarative_base()


def _engine_options(url: str) -> dict[str, Any]:
    if make_url(url).get_backend_name() == "sqlite":
        # Sync endpoints run in a threadpool; pooled connections cross threads.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


@lru_cache
def get_engine() -> Engine:
    url = (get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    logger.debug("Opening database engine for {}", make_url(url).render_as_string(hide_password=True))
    return create_engine(url, **_engine_options(url))


@lru_cache
def _get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)


@contextmanager
def get_session() -> Iterator[Session]:
    """Session for reads. Nothing is committed."""
    with _get_sessionmaker()() as session:
        yield session


@contextmanager
def transaction() -> Iterator[Session]:
    """Session bound to a single transaction.

    Committed when the block exits normally, rolled back if it raises.
    """
    with _get_sessionmaker().begin() as session:
        yield session
