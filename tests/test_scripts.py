from __future__ import annotations

import pytest

from scripts.add_user import main as add_user
from scripts.restore_user import main as restore_user
from user_api.services.user_service import UserService


def test_add_user_creates_active_user(temp_db):
    user = add_user(["--name", "Ada", "--email", "ada@example.com"])
    assert user["deleted"] is False
    assert UserService().get_user(user["id"])["email"] == "ada@example.com"


def test_add_user_rejects_blank_name(temp_db):
    with pytest.raises(SystemExit):
        add_user(["--name", "  ", "--email", "ada@example.com"])


def test_restore_user_script(temp_db):
    svc = UserService()
    uid = svc.create_user("Ada", "ada@example.com")["id"]
    svc.delete_user(uid)

    restored = restore_user(["--id", str(uid)])
    assert restored["deleted"] is False

    with pytest.raises(SystemExit) as exc_info:
        restore_user(["--id", str(uid)])
    assert "is not soft-deleted" in str(exc_info.value)
