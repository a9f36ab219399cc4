# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os

from flask import Flask

from sessionauth.infrastructure.container import Container
from sessionauth.infrastructure.db import init_db
from sessionauth.shared.config import AppConfig, load_config
from sessionauth.shared.logging import logger, setup_logging
from sessionauth.shared.middleware import (
    SlidingSessionInterface,
    configure_error_handling,
    configure_origin_guard,
    configure_request_logging,
    configure_security_headers,
    configure_session_auth,
)


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)
    init_db(config.database)

    app = Flask(__name__, static_url_path="/public")
    app.config.update(
        SECRET_KEY=config.secret_key,
        SESSION_COOKIE_NAME=config.session.cookie_name,
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SECURE=config.security.cookie_secure,
        SESSION_COOKIE_SAMESITE=config.security.cookie_samesite,
        CSRF_ENABLED=config.security.enable_csrf,
    )
    app.session_interface = SlidingSessionInterface(
        duration=config.session.duration,
        active_duration=config.session.active_duration,
    )

    # Hook order matters: request logging, then the origin check, then routes.
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_origin_guard(app)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_session_auth(app)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)

    container = Container(config)
    app.extensions["sessionauth.container"] = container
    app.register_blueprint(container.pages_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "3000")), threaded=True)


if __name__ == "__main__":
    main()
