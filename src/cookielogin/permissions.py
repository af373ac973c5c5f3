# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from cookielogin.auth.session import COOKIE_NAME, SessionStore
from cookielogin.auth.users import CredentialStore


@dataclass(frozen=True)
class CurrentUser:
    username: str
    token: str


def get_credentials(request: Request) -> CredentialStore:
    return request.app.state.credentials


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def load_user_from_request(request: Request) -> Optional[CurrentUser]:
    token = request.cookies.get(COOKIE_NAME, "")
    username = get_sessions(request).lookup(token)
    if username is None:
        return None
    return CurrentUser(username=username, token=token)


def current_user_optional(request: Request) -> Optional[CurrentUser]:
    u = getattr(request.state, "user", None)
    if u is not None:
        return u
    return load_user_from_request(request)


def cookie_settings() -> dict:
    secure = os.getenv("COOKIELOGIN_COOKIE_SECURE", "false").lower() in {"1", "true", "yes", "y"}
    return {"httponly": True, "samesite": "lax", "secure": secure, "path": "/"}
