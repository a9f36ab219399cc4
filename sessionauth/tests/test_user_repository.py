from __future__ import annotations

from datetime import UTC, datetime

import pytest

from sessionauth.domain.users.entities import User
from sessionauth.domain.users.exceptions import UserAlreadyExistsError
from sessionauth.infrastructure.db import Base, get_engine, init_db
from sessionauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from sessionauth.shared.config import AppConfig
from sessionauth.shared.errors import StoreError


def _user(email: str, nickname: str = "Bob") -> User:
    return User(
        id=0,
        email=email,
        nickname=nickname,
        password_hash="$2b$04$" + "a" * 53,
        created_at=datetime.now(UTC),
    )


@pytest.fixture()
def repository(config: AppConfig) -> SqlAlchemyUserRepository:
    init_db(config.database)
    return SqlAlchemyUserRepository()


def test_add_assigns_identifier(repository: SqlAlchemyUserRepository) -> None:
    first = repository.add(_user("a@b.com"))
    second = repository.add(_user("c@d.com"))

    assert first.id > 0
    assert second.id != first.id


def test_find_by_email_and_id(repository: SqlAlchemyUserRepository) -> None:
    created = repository.add(_user("a@b.com"))

    by_email = repository.find_by_email("a@b.com")
    by_id = repository.find_by_id(created.id)

    assert by_email is not None and by_id is not None
    assert by_email.id == by_id.id == created.id
    assert by_id.nickname == "Bob"
    assert repository.find_by_email("nobody@b.com") is None
    assert repository.find_by_id(created.id + 100) is None


def test_duplicate_email_is_rejected_without_overwrite(
    repository: SqlAlchemyUserRepository,
) -> None:
    original = repository.add(_user("a@b.com", "Bob"))

    with pytest.raises(UserAlreadyExistsError):
        repository.add(_user("a@b.com", "Mallory"))

    stored = repository.find_by_email("a@b.com")
    assert stored is not None
    assert stored.id == original.id
    assert stored.nickname == "Bob"


def test_store_failure_maps_to_store_error(repository: SqlAlchemyUserRepository) -> None:
    Base.metadata.drop_all(bind=get_engine())

    with pytest.raises(StoreError):
        repository.find_by_email("a@b.com")
    with pytest.raises(StoreError):
        repository.find_by_id(1)
    with pytest.raises(StoreError):
        repository.add(_user("a@b.com"))
