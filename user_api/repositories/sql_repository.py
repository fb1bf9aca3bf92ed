"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from sqlalchemy import select, update

from user_api.db.models import User
from user_api.db.session import get_session, transaction
from user_api.domain.projection import Projection


def _columns(projection: Optional[Projection]) -> list:
    table = User.__table__
    if projection is None:
        return list(table.columns)
    return [table.c[name] for name in projection.fields]


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session.

    Reads and writes return plain dicts holding only the projected columns.
    """

    def find_user(
        self,
        user_id: int,
        *,
        projection: Optional[Projection] = None,
        include_deleted: bool = False,
    ) -> Optional[dict]:
        stmt = select(*_columns(projection)).where(User.id == user_id)
        if not include_deleted:
            stmt = stmt.where(User.deleted == False)  # noqa: E712
        with get_session() as session:
            row = session.execute(stmt).mappings().first()
            return dict(row) if row else None

    def find_users(
        self,
        *,
        deleted: bool = False,
        skip: int = 0,
        take: int = 10,
        projection: Optional[Projection] = None,
    ) -> list[dict]:
        stmt = (
            select(*_columns(projection))
            .where(User.deleted == deleted)
            .order_by(User.id)
            .offset(skip)
            .limit(take)
        )
        with get_session() as session:
            return [dict(row) for row in session.execute(stmt).mappings().all()]

    def create_user(self, name: str, email: str, *, projection: Optional[Projection] = None) -> dict:
        now = datetime.now(timezone.utc)
        entity = User(name=name, email=email, deleted=False, created_at=now, updated_at=now)
        with transaction() as session:
            session.add(entity)
            session.flush()
            stmt = select(*_columns(projection)).where(User.id == entity.id)
            return dict(session.execute(stmt).mappings().one())

    def update_user(
        self,
        user_id: int,
        values: dict[str, Any],
        *,
        projection: Optional[Projection] = None,
        when_deleted: Optional[bool] = None,
    ) -> Optional[dict]:
        """Conditionally update one user and return the projected row.

        ``when_deleted`` restricts the write to rows currently in that state.
        Returns None when no row matched (missing id or failed predicate).
        """
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(**values, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        if when_deleted is not None:
            stmt = stmt.where(User.deleted == when_deleted)
        with transaction() as session:
            if session.execute(stmt).rowcount == 0:
                return None
            row = session.execute(select(*_columns(projection)).where(User.id == user_id)).mappings().one()
            return dict(row)

    def update_users(
        self,
        user_ids: Iterable[int],
        values: dict[str, Any],
        *,
        when_deleted: Optional[bool] = None,
    ) -> int:
        """Apply ``values`` to every matching user in one statement; returns the row count."""
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return 0
        stmt = (
            update(User)
            .where(User.id.in_(ids))
            .values(**values, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        if when_deleted is not None:
            stmt = stmt.where(User.deleted == when_deleted)
        with transaction() as session:
            return int(session.execute(stmt).rowcount or 0)
