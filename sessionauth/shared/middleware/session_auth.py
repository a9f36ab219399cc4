# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session verification and route gating.

``verify_session`` resolves the session's user and must wrap
``login_required``; used alone, ``login_required`` always redirects.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import Flask, current_app, g, redirect, request, session

from sessionauth.domain.users.entities import User
from sessionauth.shared.logging import logger

SESSION_USER_KEY = "user_id"
LOGIN_PATH = "/login"


def _load_session_user(user_id: int) -> User | None:
    container = current_app.extensions["sessionauth.container"]
    return container.load_session_user_use_case.execute(user_id)


def current_user() -> User | None:
    return g.get("user")


def start_user_session(user: User) -> None:
    session.reset()
    session[SESSION_USER_KEY] = user.id


def end_user_session() -> None:
    session.reset()


def verify_session(f: Callable) -> Callable:
    @wraps(f)
    def inner(*a: Any, **kw: Any):
        g.user = None
        user_id = session.get(SESSION_USER_KEY)
        if user_id is None:
            return f(*a, **kw)
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            logger.warning(f"session.verify: ignoring non-integer user id on {request.path}")
            return f(*a, **kw)

        # StoreError propagates to the generic error handler.
        user = _load_session_user(user_id)
        if user is None:
            logger.info(f"session.verify: user={user_id} no longer exists, continuing anonymous")
            return f(*a, **kw)

        g.user = user
        logger.debug(f"session.verify: user={user.id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner


def login_required(f: Callable) -> Callable:
    @wraps(f)
    def inner(*a: Any, **kw: Any):
        if current_user() is None:
            logger.info(f"session.gate: redirecting anonymous {request.method} {request.path}")
            return redirect(LOGIN_PATH)
        return f(*a, **kw)

    return inner


def configure_session_auth(app: Flask) -> None:
    @app.context_processor
    def _inject_user() -> dict[str, Any]:
        return {"current_user": current_user()}


__all__ = [
    "LOGIN_PATH",
    "SESSION_USER_KEY",
    "configure_session_auth",
    "current_user",
    "end_user_session",
    "login_required",
    "start_user_session",
    "verify_session",
]
