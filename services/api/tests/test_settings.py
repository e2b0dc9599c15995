"""Tests for settings parsing."""

import pytest

from app.settings import Settings


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('["https://a.com", "http://localhost:5173"]', ["https://a.com", "http://localhost:5173"]),
        ("https://a.com, http://localhost:5173", ["https://a.com", "http://localhost:5173"]),
        ("", []),
        ("*", ["*"]),
    ],
)
def test_cors_origins_accepts_json_and_csv(raw: str, expected: list[str]):
    settings = Settings(CORS_ORIGINS=raw)
    assert settings.cors_origins == expected


def test_cors_origins_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://mandi.example,https://admin.mandi.example")
    settings = Settings()
    assert settings.cors_origins == ["https://mandi.example", "https://admin.mandi.example"]


def test_async_database_url_rewrites_plain_postgres_scheme():
    settings = Settings(database_url="postgresql://u:p@db:5432/mandi_challenge")
    assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/mandi_challenge"


def test_async_database_url_keeps_explicit_driver():
    url = "postgresql+asyncpg://u:p@db:5432/mandi_challenge"
    assert Settings(database_url=url).async_database_url == url


def test_environment_reads_node_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("NODE_ENV", "production")
    assert Settings().environment == "production"


def test_defaults():
    settings = Settings()
    assert settings.app_version == "1.0.0"
    assert settings.price_cache_ttl == 900
