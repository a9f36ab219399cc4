# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from sessionauth.domain.users.entities import User as DomainUser
from sessionauth.domain.users.exceptions import UserAlreadyExistsError
from sessionauth.domain.users.repositories import UserRepository
from sessionauth.infrastructure.db.models import User
from sessionauth.infrastructure.db.session import session_scope
from sessionauth.shared.errors.base import StoreError
from sessionauth.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        nickname=row.nickname,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.scalars(select(User).where(User.email == email)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.find_by_email: store failure {type(exc).__name__}")
            raise StoreError("find_by_email") from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.get(User, user_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.error(f"users.find_by_id: store failure {type(exc).__name__}")
            raise StoreError("find_by_id") from exc

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    email=user.email,
                    nickname=user.nickname,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: duplicate email rejected")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.add: store failure {type(exc).__name__}")
            raise StoreError("add") from exc
