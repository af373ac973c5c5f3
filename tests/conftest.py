import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

import pytest
from fastapi.testclient import TestClient

from cookielogin.app import create_app
from cookielogin.auth.session import SessionStore
from cookielogin.auth.users import DEFAULT_USERS, CredentialStore


@pytest.fixture()
def credentials() -> CredentialStore:
    return CredentialStore(DEFAULT_USERS)


@pytest.fixture()
def sessions() -> SessionStore:
    return SessionStore()


@pytest.fixture()
def client(credentials, sessions, monkeypatch) -> TestClient:
    # Cookies marked Secure would not be sent back over http://testserver
    monkeypatch.delenv("COOKIELOGIN_COOKIE_SECURE", raising=False)
    app = create_app(credentials=credentials, sessions=sessions)
    return TestClient(app, follow_redirects=False)


@pytest.fixture()
def login(client):
    """POST the login form and return the response."""

    def _login(username: str, password: str):
        return client.post("/login", data={"username": username, "password": password})

    return _login
