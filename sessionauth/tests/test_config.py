from __future__ import annotations

import pytest

from sessionauth.shared.config import AppConfig, DatabaseConfig, SecurityConfig, SessionConfig

_ENV_VARS = (
    "APP_ENV",
    "SECRET_KEY",
    "DATABASE_URL",
    "SESSION_DURATION",
    "SESSION_ACTIVE_DURATION",
    "COOKIE_SECURE",
    "ENABLE_CSRF",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of these tests.
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    config = AppConfig()

    assert config.is_production() is False
    assert config.password_hash_rounds == 14
    assert config.session.cookie_name == "session"
    assert config.session.duration == 30 * 60
    assert config.session.active_duration == 5 * 60
    assert config.security.cookie_secure is True
    assert config.security.enable_csrf is True


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "from-env")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///from-env.db")
    monkeypatch.setenv("SESSION_DURATION", "600")
    monkeypatch.setenv("COOKIE_SECURE", "false")

    config = AppConfig()

    assert config.secret_key == "from-env"
    assert config.database.url == "sqlite:///from-env.db"
    assert config.session.duration == 600
    assert config.security.cookie_secure is False


def test_production_refuses_fallback_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "postgresql://db/app")

    with pytest.raises(SystemExit) as exc_info:
        AppConfig()

    assert exc_info.value.code == 1


def test_production_refuses_fallback_database(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "a-long-random-production-secret")

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_refuses_insecure_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.setenv("SECRET_KEY", "dev")
    monkeypatch.setenv("DATABASE_URL", "postgresql://db/app")

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_with_explicit_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "a-long-random-production-secret")
    monkeypatch.setenv("DATABASE_URL", "postgresql://db/app")

    config = AppConfig()

    assert config.is_production()
    assert config.database.url == "postgresql://db/app"


def test_explicit_construction() -> None:
    config = AppConfig(
        app_env="production",
        secret_key="a-long-random-production-secret",
        database=DatabaseConfig(url="postgresql://db/app"),
        session=SessionConfig(duration=900),
        security=SecurityConfig(enable_hsts=True),
    )

    assert config.session.duration == 900
    assert config.security.enable_hsts is True
