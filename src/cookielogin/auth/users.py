# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_USERS: Dict[str, str] = {
    "john": "1234567890",
    "jane": "0987654321",
}


class CredentialFileError(ValueError):
    """The configured users file could not be parsed."""


class CredentialStore:
    """Read-only username -> password table."""

    def __init__(self, users: Mapping[str, str]) -> None:
        self._users: Dict[str, str] = dict(users)

    def verify(self, username: Optional[str], password: Optional[str]) -> bool:
        # Plain equality: passwords are stored as given.
        if not username or password is None:
            return False
        stored = self._users.get(username)
        return stored is not None and stored == password

    def usernames(self) -> Iterator[str]:
        return iter(sorted(self._users))

    def __contains__(self, username: object) -> bool:
        return username in self._users

    def __len__(self) -> int:
        return len(self._users)


def _users_path() -> Optional[Path]:
    raw = os.getenv("COOKIELOGIN_USERS_PATH", "").strip()
    return Path(raw).resolve() if raw else None


def _load_users_file(path: Path) -> Dict[str, str]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise CredentialFileError(f"Invalid users file {path}: {e}") from e
    users = (raw.get("users") or {}) if isinstance(raw, dict) else {}
    if not isinstance(users, dict):
        raise CredentialFileError(f"Invalid users file {path}: 'users' must be a mapping")
    out: Dict[str, str] = {}
    for uname, udata in users.items():
        if not isinstance(udata, dict):
            continue
        username = str(uname).strip()
        password = udata.get("password")
        if not username or password is None or str(password) == "":
            continue
        out[username] = str(password)
    return out


def load_credentials(path: Optional[Path] = None) -> CredentialStore:
    """Build the credential store from a YAML file, or the built-in users.

    The file layout is::

        users:
          john:
            password: "1234567890"
    """
    path = path if path is not None else _users_path()
    if path is None or not path.exists():
        return CredentialStore(DEFAULT_USERS)
    users = _load_users_file(path)
    logger.info("Loaded %d users from %s", len(users), path)
    return CredentialStore(users)
