# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import secrets
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)

COOKIE_NAME = "session"
TOKEN_BYTES = 32


class SessionStore:
    """Server-side map of session token -> username.

    Sessions have no expiry; they live until logout or process exit.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def create(self, username: str) -> str:
        token = secrets.token_urlsafe(TOKEN_BYTES)
        with self._lock:
            self._sessions[token] = username
        logger.debug("Session created for %s", username)
        return token

    def lookup(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        with self._lock:
            return self._sessions.get(token)

    def delete(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            username = self._sessions.pop(token, None)
        if username is not None:
            logger.debug("Session deleted for %s", username)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


__all__ = ["COOKIE_NAME", "SessionStore"]
