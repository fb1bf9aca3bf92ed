"""Schema bootstrap for the users table: ``python -m user_api.db.create_tables``."""
from __future__ import annotations

from typing import Optional

from loguru import logger
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the users table on Base.metadata


def create_all(engine: Optional[Engine] = None) -> None:
    """Create missing tables; existing ones are left untouched."""
    Base.metadata.create_all(bind=engine or get_engine(), checkfirst=True)
    logger.debug("Schema ready: {}", ", ".join(sorted(Base.metadata.tables)))


def drop_all(engine: Optional[Engine] = None) -> None:
    Base.metadata.drop_all(bind=engine or get_engine())


if __name__ == "__main__":
    try:
        create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not create the users schema: {exc}") from exc
