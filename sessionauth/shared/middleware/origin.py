# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, request

from sessionauth.application.services.input_guard import check_origin
from sessionauth.infrastructure.audit import AuditAction, audit_log
from sessionauth.shared.errors.base import OriginRejectedError
from sessionauth.shared.utils import get_client_ip

EXEMPT_ENDPOINTS: tuple[str, ...] = ("static",)


def configure_origin_guard(app: Flask) -> None:
    @app.before_request
    def _verify_origin() -> None:
        if request.endpoint in EXEMPT_ENDPOINTS:
            return
        user_agent = request.headers.get("User-Agent")
        if check_origin(user_agent):
            return
        audit_log(
            AuditAction.ORIGIN_REJECTED,
            ip_address=get_client_ip(),
            details={"path": request.path, "user_agent": user_agent or ""},
            success=False,
        )
        raise OriginRejectedError(user_agent)


__all__ = ["configure_origin_guard"]
