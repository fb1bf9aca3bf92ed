from __future__ import annotations

from user_api.core import config as core_config


def test_settings_defaults(monkeypatch):
    for name in ("APP_ENV", "DATABASE_URL", "USERS_DEFAULT_PAGE_SIZE", "USERS_MAX_PAGE_SIZE", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    settings = core_config.get_settings()
    assert settings.app_env == "dev"
    assert settings.database_url == "sqlite:///./users.db"
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100
    assert settings.cors_origins == ()
    core_config.get_settings.cache_clear()


def test_settings_parse_environment(monkeypatch):
    monkeypatch.setenv("USERS_MAX_PAGE_SIZE", "not-a-number")
    monkeypatch.setenv("USERS_DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example/, https://b.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    core_config.get_settings.cache_clear()
    settings = core_config.get_settings()
    assert settings.max_page_size == 100
    assert settings.default_page_size == 25
    assert settings.cors_origins == ("https://a.example", "https://b.example")
    assert settings.log_level == "DEBUG"
    core_config.get_settings.cache_clear()
