# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, g, render_template, request
from werkzeug.exceptions import HTTPException, NotFound

from sessionauth.shared.logging import logger
from sessionauth.shared.utils import get_client_ip

from .base import AppError, OriginRejectedError
from .messages import GENERIC_ERROR


def render_error_page(status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR):
    return render_template("error.html", error=GENERIC_ERROR), status


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(OriginRejectedError)
    def _handle_origin(exc: OriginRejectedError):
        return render_template("bad_origin.html"), exc.status

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.error(f"Unhandled application error {exc.code} on {request.method} {request.path}")
        return render_error_page()

    @app.errorhandler(NotFound)
    def _handle_not_found(_exc: NotFound):
        return render_template("404.html"), HTTPStatus.NOT_FOUND

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user = getattr(g, "user", None)
        user_id = user.id if user is not None else None

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {get_client_ip()}, user={user_id}, "
                f"query={dict(request.args)}, body_size={len(request.get_data())}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return render_error_page()


__all__ = ["register_error_handler", "render_error_page"]
