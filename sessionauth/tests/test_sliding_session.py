from __future__ import annotations

import pytest
from flask import Flask, session

from sessionauth.domain.users.entities import SessionWindow
from sessionauth.shared.middleware.sliding_session import SlidingSession, SlidingSessionInterface

MINUTE = 60.0
T0 = 1_700_000_000.0


class FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, minutes: float) -> None:
        self.now += minutes * MINUTE


def test_session_window_renewal_never_shortens() -> None:
    window = SessionWindow.start(T0, 30 * MINUTE)

    assert window.expires_at == T0 + 30 * MINUTE
    assert window.renewed(T0 + MINUTE, 5 * MINUTE) == window
    assert window.renewed(T0 + 28 * MINUTE, 5 * MINUTE).expires_at == T0 + 33 * MINUTE
    assert window.is_expired(T0 + 30 * MINUTE)
    assert not window.is_expired(T0 + 30 * MINUTE - 1)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(T0)


@pytest.fixture()
def session_app(clock: FakeClock) -> Flask:
    app = Flask(__name__)
    app.secret_key = "test-secret-key"
    app.session_interface = SlidingSessionInterface(
        duration=30 * MINUTE, active_duration=5 * MINUTE, clock=clock
    )

    @app.post("/login")
    def _login():
        session.reset()
        session["user_id"] = 7
        return "ok"

    @app.get("/whoami")
    def _whoami():
        return str(session.get("user_id", "anonymous"))

    @app.post("/logout")
    def _logout():
        session.reset()
        return "bye"

    return app


def test_session_accepted_until_absolute_expiry(session_app: Flask, clock: FakeClock) -> None:
    client = session_app.test_client()
    client.post("/login")

    clock.advance(29)
    # A separate client, so this request does not renew the original cookie.
    other = session_app.test_client()
    other.set_cookie("session", client.get_cookie("session").value)
    assert other.get("/whoami").get_data(as_text=True) == "7"

    clock.advance(1.5)
    assert client.get("/whoami").get_data(as_text=True) == "anonymous"


def test_request_extends_session_by_active_window(session_app: Flask, clock: FakeClock) -> None:
    client = session_app.test_client()
    client.post("/login")

    clock.advance(28)
    assert client.get("/whoami").get_data(as_text=True) == "7"

    # Past the original 30 minutes, but within 5 minutes of the last request.
    clock.advance(4)
    assert client.get("/whoami").get_data(as_text=True) == "7"

    clock.advance(4.5)
    assert client.get("/whoami").get_data(as_text=True) == "7"

    clock.advance(5.5)
    assert client.get("/whoami").get_data(as_text=True) == "anonymous"


def test_expired_cookie_is_deleted(session_app: Flask, clock: FakeClock) -> None:
    client = session_app.test_client()
    client.post("/login")

    clock.advance(31)
    response = client.get("/whoami")

    assert response.get_data(as_text=True) == "anonymous"
    assert client.get_cookie("session") is None


def test_tampered_cookie_is_rejected(session_app: Flask) -> None:
    client = session_app.test_client()
    client.post("/login")
    value = client.get_cookie("session").value

    client.set_cookie("session", "x" + value)

    assert client.get("/whoami").get_data(as_text=True) == "anonymous"


def test_cookie_signed_with_other_secret_is_rejected(session_app: Flask) -> None:
    other = Flask(__name__)
    other.secret_key = "another-secret"
    other.session_interface = session_app.session_interface
    other.add_url_rule("/login", view_func=session_app.view_functions["_login"], methods=["POST"])
    forged = other.test_client()
    forged.post("/login")

    client = session_app.test_client()
    client.set_cookie("session", forged.get_cookie("session").value)

    assert client.get("/whoami").get_data(as_text=True) == "anonymous"


def test_cookie_flags(session_app: Flask) -> None:
    session_app.config.update(SESSION_COOKIE_SECURE=True, SESSION_COOKIE_SAMESITE="Lax")
    client = session_app.test_client()

    response = client.post("/login")
    header = response.headers["Set-Cookie"]

    assert header.startswith("session=")
    assert "HttpOnly" in header
    assert "Secure" in header
    assert "SameSite=Lax" in header
    assert "Max-Age" not in header
    assert "Expires" not in header


def test_logout_deletes_cookie(session_app: Flask) -> None:
    client = session_app.test_client()
    client.post("/login")

    client.post("/logout")

    assert client.get_cookie("session") is None
    assert client.get("/whoami").get_data(as_text=True) == "anonymous"


def test_login_starts_a_fresh_window(session_app: Flask, clock: FakeClock) -> None:
    client = session_app.test_client()
    client.post("/logout")
    client.post("/login")

    clock.advance(20)
    client.post("/login")

    # 29 minutes after the second login, 49 after the first.
    clock.advance(29)
    assert client.get("/whoami").get_data(as_text=True) == "7"


def test_saving_without_secret_key_raises() -> None:
    app = Flask(__name__)
    interface = SlidingSessionInterface(duration=30 * MINUTE, active_duration=5 * MINUTE)
    session_data = SlidingSession({"user_id": 1})

    with app.test_request_context("/"):
        response = app.make_response("ok")
        with pytest.raises(RuntimeError):
            interface.save_session(app, session_data, response)

    assert "Set-Cookie" not in response.headers
    assert session_data.window is None
