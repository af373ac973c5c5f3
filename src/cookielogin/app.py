# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from cookielogin.auth.session import COOKIE_NAME, SessionStore
from cookielogin.auth.users import CredentialStore, load_credentials
from cookielogin.permissions import (
    cookie_settings,
    current_user_optional,
    get_credentials,
    get_sessions,
)
from cookielogin.views import render_home, render_login

logger = logging.getLogger(__name__)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


def _clear_session_cookie(resp: RedirectResponse) -> None:
    settings = cookie_settings()
    resp.delete_cookie(
        COOKIE_NAME,
        path=settings["path"],
        secure=settings["secure"],
        httponly=settings["httponly"],
        samesite=settings["samesite"],
    )


def create_app(
    credentials: Optional[CredentialStore] = None,
    sessions: Optional[SessionStore] = None,
) -> FastAPI:
    """Build the login app around explicitly owned stores."""
    app = FastAPI()
    app.state.credentials = credentials if credentials is not None else load_credentials()
    app.state.sessions = sessions if sessions is not None else SessionStore()

    @app.middleware("http")
    async def _auth_middleware(request: Request, call_next):
        request.state.user = current_user_optional(request)
        return await call_next(request)

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request):
        user = request.state.user
        if user is None:
            resp = _redirect("/login")
            _clear_session_cookie(resp)
            return resp
        return HTMLResponse(render_home(user.username))

    @app.get("/login", response_class=HTMLResponse)
    def login_get(request: Request):
        if request.state.user is not None:
            return _redirect("/")
        return HTMLResponse(render_login())

    @app.post("/login")
    def login_post(
        username: str = Form(""),
        password: str = Form(""),
        credentials: CredentialStore = Depends(get_credentials),
        sessions: SessionStore = Depends(get_sessions),
    ):
        if not credentials.verify(username, password):
            logger.info("Login failed for %r", username)
            return _redirect("/login")
        token = sessions.create(username)
        logger.info("Login ok for %s", username)
        resp = _redirect("/")
        resp.set_cookie(COOKIE_NAME, token, **cookie_settings())
        return resp

    @app.get("/logout")
    def logout(request: Request, sessions: SessionStore = Depends(get_sessions)):
        token = request.cookies.get(COOKIE_NAME)
        resp = _redirect("/")
        if token:
            _clear_session_cookie(resp)
        user = request.state.user
        if user is not None:
            sessions.delete(user.token)
            logger.info("Logout for %s", user.username)
        return resp

    return app


app = create_app()
