# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac
import secrets
from collections.abc import Callable
from functools import wraps

from flask import current_app, render_template, request, session

from sessionauth.shared.logging import logger

SAFE_METHODS: tuple[str, ...] = ("GET", "HEAD", "OPTIONS")
CSRF_SESSION_KEY = "_csrf"
CSRF_FORM_FIELD = "_csrf"
CSRF_HEADER = "X-CSRF-Token"


def _is_enabled() -> bool:
    return current_app.config.get("CSRF_ENABLED", True)


def issue_csrf_token() -> str:
    token = session.get(CSRF_SESSION_KEY)
    if not token:
        token = secrets.token_urlsafe(32)
        session[CSRF_SESSION_KEY] = token
    return token


def csrf_protect(f: Callable):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not _is_enabled():
            return f(*args, **kwargs)
        if request.method in SAFE_METHODS:
            return f(*args, **kwargs)
        supplied = (request.form.get(CSRF_FORM_FIELD) or request.headers.get(CSRF_HEADER) or "").strip()
        expected = session.get(CSRF_SESSION_KEY) or ""
        if not supplied or not expected or not hmac.compare_digest(supplied, expected):
            logger.warning(f"csrf: token mismatch on {request.method} {request.path}")
            return render_template("csrf.html"), 403
        return f(*args, **kwargs)

    return wrapper


__all__ = ["CSRF_FORM_FIELD", "csrf_protect", "issue_csrf_token"]
