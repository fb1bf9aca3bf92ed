"""
SQL storage for users.

Reads go through ``get_session()``; every write goes through ``transaction()``
so the commit/rollback decision lives in one place.
"""

from .session import Base, get_engine, get_session, transaction

__all__ = ["Base", "get_engine", "get_session", "transaction"]
