# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authentication helpers.

This package provides:
- The credential store (built-in users or data/users.yml)
- The in-memory session store behind the ``session`` cookie
"""
