"""Configuration — URL normalization and environment aliases."""

import pytest

from store_api.config import Settings, normalize_database_url


@pytest.mark.parametrize("raw,expected", [
    ("postgresql://u:p@db/store", "postgresql+asyncpg://u:p@db/store"),
    ("postgres://u:p@db/store", "postgresql+asyncpg://u:p@db/store"),
    ("postgresql+asyncpg://u:p@db/store", "postgresql+asyncpg://u:p@db/store"),
    ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
])
def test_normalize_database_url(raw, expected):
    assert normalize_database_url(raw) == expected


def test_db_url_alias_is_accepted(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_URL", "postgresql://u:p@db/store")
    monkeypatch.setenv("PORT", "9100")

    settings = Settings(_env_file=None)

    assert settings.database_url == "postgresql+asyncpg://u:p@db/store"
    assert settings.port == 9100
    assert settings.access_token_expire_minutes == 60
