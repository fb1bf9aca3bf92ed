from __future__ import annotations

import pytest

from user_api.db.models import User
from user_api.db.session import get_session, transaction
from user_api.repositories.sql_repository import SQLRepository


def test_transaction_commits_when_block_succeeds(temp_db):
    with transaction() as session:
        session.add(User(name="Ada", email="ada@example.com"))

    assert [row["name"] for row in SQLRepository().find_users()] == ["Ada"]


def test_transaction_rolls_back_when_block_raises(temp_db):
    with pytest.raises(RuntimeError):
        with transaction() as session:
            session.add(User(name="Ada", email="ada@example.com"))
            session.flush()
            raise RuntimeError("abort")

    assert SQLRepository().find_users() == []


def test_read_session_does_not_commit(temp_db):
    with get_session() as session:
        session.add(User(name="Ada", email="ada@example.com"))
        session.flush()

    assert SQLRepository().find_users() == []
