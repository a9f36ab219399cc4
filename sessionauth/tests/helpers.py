from __future__ import annotations

import re

from flask.testing import FlaskClient

BROWSER_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"

_CSRF_RE = re.compile(r'name="_csrf" value="([^"]+)"')


def extract_csrf(html: str) -> str:
    match = _CSRF_RE.search(html)
    assert match, "form has no CSRF field"
    return match.group(1)


def fetch_csrf(client: FlaskClient, path: str = "/login") -> str:
    response = client.get(path)
    assert response.status_code == 200
    return extract_csrf(response.get_data(as_text=True))


def register(client: FlaskClient, email: str, nickname: str, password: str):
    token = fetch_csrf(client, "/register")
    return client.post(
        "/register",
        data={"email": email, "nickname": nickname, "password": password, "_csrf": token},
    )


def login(client: FlaskClient, email: str, password: str):
    token = fetch_csrf(client, "/login")
    return client.post("/login", data={"email": email, "password": password, "_csrf": token})
