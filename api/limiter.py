"""
api/limiter.py -- Shared slowapi rate limiter instance.

Imported by api/main.py (mounted as middleware, exposed on app.state) and by
api/routes/administrators.py, which throttles the login route.

A single shared instance keeps one in-memory counter store for every route.
The login limit is read from Settings on each check, so tests and deployments
change it through LOGIN_RATE_LIMIT rather than by editing code.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from core.config import get_settings

limiter = Limiter(key_func=get_remote_address, storage_uri="memory://")


def login_rate_limit() -> str:
    return get_settings().login_rate_limit
