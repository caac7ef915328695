"""
Admin Decorator
"""

from functools import wraps

from flask import session

from pizzeria.errors import AuthError
from pizzeria.extensions import get_auth_gate

# Key in the signed Flask session that holds the server-side session token
SESSION_TOKEN_KEY = 'sid'


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.

    Runs before the view touches the request body or the database, and
    answers 401 with the same body whatever the reason (no cookie, unknown
    token, expired or non-admin session).
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if get_auth_gate().check(session.get(SESSION_TOKEN_KEY)) is None:
            raise AuthError()
        return f(*args, **kwargs)
    return wrapper
