# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import Blueprint, redirect, render_template, request
from pydantic import BaseModel, ValidationError

from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from sessionauth.infrastructure.audit import AuditAction, audit_log
from sessionauth.interfaces.http.dto.auth import LoginFormDTO, RegisterFormDTO
from sessionauth.shared.errors import InputValidationError, StoreError, user_message
from sessionauth.shared.errors.validation import raise_form_error
from sessionauth.shared.logging import logger
from sessionauth.shared.middleware.csrf import csrf_protect, issue_csrf_token
from sessionauth.shared.middleware.session_auth import (
    LOGIN_PATH,
    end_user_session,
    start_user_session,
)
from sessionauth.shared.utils import get_client_ip

DASHBOARD_PATH = "/dashboard"

DTO = TypeVar("DTO", bound=BaseModel)


def _parse_form(dto: type[DTO]) -> DTO:
    try:
        return dto.model_validate(request.form.to_dict())
    except ValidationError as exc:
        raise_form_error(exc)


def _render_form(template: str, error_code: str | None = None):
    error = user_message(error_code) if error_code else None
    return render_template(template, csrf_token=issue_csrf_token(), error=error), 200


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def login_form(self):
        return _render_form("login.html")

    def register_form(self):
        return _render_form("register.html")

    @csrf_protect
    def register(self):
        try:
            dto = _parse_form(RegisterFormDTO)
            user = self._register_use_case.execute(dto.email, dto.nickname, dto.password)
        except InputValidationError as exc:
            logger.info(f"auth.register: rejected input code={exc.code}")
            return _render_form("register.html", exc.code)
        except UserAlreadyExistsError as exc:
            audit_log(
                AuditAction.REGISTER_FAILED,
                ip_address=get_client_ip(),
                details={"reason": exc.code},
                success=False,
            )
            return _render_form("register.html", exc.code)
        except StoreError as exc:
            logger.error(f"auth.register: store failure context={exc.context}")
            return _render_form("register.html", exc.code)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=get_client_ip(),
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return redirect(LOGIN_PATH)

    @csrf_protect
    def login(self):
        ip_address = get_client_ip()
        try:
            dto = _parse_form(LoginFormDTO)
            user = self._login_use_case.execute(dto.email, dto.password)
        except InputValidationError as exc:
            logger.info(f"auth.login: rejected input code={exc.code}")
            return _render_form("login.html", exc.code)
        except InvalidCredentialsError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"reason": exc.code},
                success=False,
            )
            return _render_form("login.html", exc.code)

        start_user_session(user)
        audit_log(AuditAction.LOGIN_SUCCESS, user_id=user.id, ip_address=ip_address, success=True)
        logger.info(f"auth.login: ok user_id={user.id}")
        return redirect(DASHBOARD_PATH)

    @csrf_protect
    def logout(self):
        end_user_session()
        audit_log(AuditAction.LOGOUT, ip_address=get_client_ip(), success=True)
        logger.info("auth.logout: ok")
        return redirect(LOGIN_PATH)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", endpoint="login_form", view_func=self.login_form, methods=["GET"])
        bp.add_url_rule("/login", endpoint="login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/register", endpoint="register_form", view_func=self.register_form, methods=["GET"]
        )
        bp.add_url_rule("/register", endpoint="register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/logout", endpoint="logout", view_func=self.logout, methods=["POST"])
        return bp
