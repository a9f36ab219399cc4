from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from sessionauth.app import create_app
from sessionauth.shared.config import AppConfig, DatabaseConfig, SecurityConfig

from .helpers import BROWSER_UA


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "app.log"))


@pytest.fixture()
def config(tmp_path) -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key="test-secret-key",
        password_hash_rounds=4,
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'test.db'}"),
        security=SecurityConfig(cookie_secure=False),
    )


@pytest.fixture()
def app(config: AppConfig) -> Flask:
    return create_app(config)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as client:
        client.environ_base["HTTP_USER_AGENT"] = BROWSER_UA
        yield client
