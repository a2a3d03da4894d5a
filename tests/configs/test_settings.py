"""
Test suite for application settings.

System role: Verification of configuration loading
"""

import pytest
from pydantic import ValidationError

from backend.configs import ApiSettings, DatabaseSettings, Settings, StoreSettings


class TestDatabaseSettings:
    """Test suite for DatabaseSettings."""

    def test_builds_asyncpg_url_from_fields(self) -> None:
        settings = DatabaseSettings(url=None, host="db", port=5433, user="u", password="p", db="users")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5433/users"
        assert settings.is_sqlite is False

    def test_ssl_require_is_passed_to_asyncpg(self) -> None:
        settings = DatabaseSettings(url=None, sslmode="require")

        assert settings.async_database_url.endswith("?ssl=require")

    def test_url_override_wins(self) -> None:
        settings = DatabaseSettings(url="sqlite+aiosqlite:///:memory:")

        assert settings.async_database_url == "sqlite+aiosqlite:///:memory:"
        assert settings.is_sqlite is True

    def test_reads_prefixed_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_URL", "sqlite+aiosqlite:///./users.db")

        assert DatabaseSettings().async_database_url == "sqlite+aiosqlite:///./users.db"


class TestSettings:
    """Test suite for the aggregated Settings."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("STORE_COLLECTION", "API_ROLE_HEADER", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.store.collection == "users"
        assert settings.store.create_tables_on_startup is True
        assert settings.api.role_header == "X-User-Role"

    def test_nested_settings_read_environment_at_construction(self, monkeypatch) -> None:
        monkeypatch.setenv("STORE_COLLECTION", "people")
        monkeypatch.setenv("API_ROLE_HEADER", "X-Caller-Role")

        settings = Settings()

        assert settings.store.collection == "people"
        assert settings.api.role_header == "X-Caller-Role"

    def test_log_level_is_normalized(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_explicit_sections(self) -> None:
        settings = Settings(
            store=StoreSettings(collection="members"),
            api=ApiSettings(port=9000),
        )

        assert settings.store.collection == "members"
        assert settings.api.port == 9000


class TestApiSettings:
    """Test suite for ApiSettings throttle fields."""

    def test_throttle_defaults(self, monkeypatch) -> None:
        for name in ("API_THROTTLE_TTL", "API_THROTTLE_LIMIT", "API_THROTTLE_ENABLED"):
            monkeypatch.delenv(name, raising=False)

        settings = ApiSettings()

        assert settings.throttle_ttl == 60
        assert settings.throttle_limit == 100
        assert settings.throttle_enabled is True

    def test_reads_throttle_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("API_THROTTLE_TTL", "10")
        monkeypatch.setenv("API_THROTTLE_LIMIT", "5")

        settings = ApiSettings()

        assert settings.throttle_ttl == 10
        assert settings.throttle_limit == 5

    def test_non_positive_limit_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ApiSettings(throttle_limit=0)
