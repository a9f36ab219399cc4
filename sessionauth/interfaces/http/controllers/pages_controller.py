# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, redirect, render_template, session

from sessionauth.shared.middleware.csrf import issue_csrf_token
from sessionauth.shared.middleware.session_auth import (
    SESSION_USER_KEY,
    current_user,
    login_required,
    verify_session,
)


class PagesController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("pages", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/dashboard", view_func=self.dashboard, methods=["GET"])
        return bp

    def index(self):
        # Only checks for a user id; the dashboard does the real verification.
        if session.get(SESSION_USER_KEY) is None:
            return render_template("index.html")
        return redirect("/dashboard")

    @verify_session
    @login_required
    def dashboard(self):
        user = current_user()
        return render_template(
            "dashboard.html", nickname=user.nickname, csrf_token=issue_csrf_token()
        )
