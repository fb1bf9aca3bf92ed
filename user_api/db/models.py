"""SQLAlchemy models for the user resource."""
from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Integer, String, false, func

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # No unique constraint: duplicate emails are accepted.
    email = Column(String(255), nullable=False, index=True)
    deleted = Column(Boolean, default=False, server_default=false(), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
