# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from sessionauth.shared.config import DatabaseConfig
from sessionauth.shared.logging import logger


class Base(DeclarativeBase):
    pass


SessionLocal = scoped_session(
    sessionmaker(autoflush=False, autocommit=False, expire_on_commit=False)
)

_engine: Engine | None = None


def build_engine(config: DatabaseConfig) -> Engine:
    connect_args: dict[str, object] = {}
    if config.url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
    return create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("database is not initialised; call init_db() first")
    return _engine


@contextmanager
def session_scope() -> Iterator[Session]:
    session = SessionLocal()
    logger.debug("db.session: opened scoped session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed scoped session")
    except Exception:
        logger.debug("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()
        logger.debug("db.session: closed scoped session")


def init_db(config: DatabaseConfig) -> Engine:
    global _engine
    if _engine is not None:
        _engine.dispose()
    SessionLocal.remove()
    _engine = build_engine(config)
    SessionLocal.configure(bind=_engine)

    from sessionauth.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=_engine)
    logger.info("Database schema ensured")
    return _engine
