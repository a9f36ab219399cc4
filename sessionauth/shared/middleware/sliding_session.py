# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed client-side sessions with an absolute lifetime and sliding renewal.

The whole session lives in the cookie; nothing is kept server-side. The
payload is signed with itsdangerous and carries its own validity window, so
an expired cookie is rejected even if the browser keeps sending it.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from flask import Flask, Request, Response
from flask.sessions import SecureCookieSession, SecureCookieSessionInterface
from itsdangerous import BadSignature

from sessionauth.domain.users.entities import SessionWindow
from sessionauth.shared.logging import logger


class SlidingSession(SecureCookieSession):
    window: SessionWindow | None = None

    def reset(self) -> None:
        """Drop all content and start a new window on the next save."""
        self.clear()
        self.window = None


class SlidingSessionInterface(SecureCookieSessionInterface):
    salt = "sessionauth-session"
    session_class = SlidingSession

    def __init__(
        self,
        *,
        duration: float,
        active_duration: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.duration = duration
        self.active_duration = active_duration
        self.clock = clock

    def _discard(self) -> SlidingSession:
        # Modified so that save_session deletes the stale cookie.
        session = self.session_class()
        session.modified = True
        return session

    def open_session(self, app: Flask, request: Request) -> SlidingSession | None:
        serializer = self.get_signing_serializer(app)
        if serializer is None:
            return None

        value = request.cookies.get(self.get_cookie_name(app))
        if not value:
            return self.session_class()

        try:
            payload: dict[str, Any] = serializer.loads(value)
            window = SessionWindow(
                issued_at=float(payload["iat"]),
                expires_at=float(payload["exp"]),
            )
            data = dict(payload["d"])
        except BadSignature:
            logger.warning("session: rejected cookie with bad signature")
            return self._discard()
        except (KeyError, TypeError, ValueError):
            logger.warning("session: rejected malformed cookie payload")
            return self._discard()

        if window.is_expired(self.clock()):
            logger.info("session: expired cookie discarded")
            return self._discard()

        session = self.session_class(data)
        session.window = window
        return session

    def save_session(
        self, app: Flask, session: SlidingSession, response: Response
    ) -> None:
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)
        secure = self.get_cookie_secure(app)
        samesite = self.get_cookie_samesite(app)
        httponly = self.get_cookie_httponly(app)

        if session.accessed:
            response.vary.add("Cookie")

        if not session:
            if session.modified:
                response.delete_cookie(
                    name,
                    domain=domain,
                    path=path,
                    secure=secure,
                    samesite=samesite,
                    httponly=httponly,
                )
                response.vary.add("Cookie")
            return

        serializer = self.get_signing_serializer(app)
        if serializer is None:
            raise RuntimeError("cannot sign the session: SECRET_KEY is not set")

        now = self.clock()
        if session.window is None:
            window = SessionWindow.start(now, self.duration)
        else:
            window = session.window.renewed(now, self.active_duration)
        session.window = window

        value = serializer.dumps(
            {"d": dict(session), "iat": window.issued_at, "exp": window.expires_at}
        )
        # No Max-Age: the cookie ends with the browser session.
        response.set_cookie(
            name,
            value,
            domain=domain,
            path=path,
            secure=secure,
            samesite=samesite,
            httponly=httponly,
        )
        response.vary.add("Cookie")


__all__ = ["SlidingSession", "SlidingSessionInterface"]
