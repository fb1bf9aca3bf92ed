from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the user_api package and scripts importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from user_api.core import config as core_config  # noqa: E402
from user_api.db.create_tables import create_all, drop_all  # noqa: E402
from user_api.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and tear it down completely afterwards."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    for name in ("USERS_DEFAULT_PAGE_SIZE", "USERS_MAX_PAGE_SIZE", "APP_ENV", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    _clear_caches()

    engine = db_session.get_engine()
    drop_all(engine)
    create_all(engine)

    yield db_file

    try:
        drop_all(engine)
    finally:
        engine.dispose()
        _clear_caches()
