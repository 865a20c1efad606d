"""
Authentication Decorators

Request-level filters that verify the session token before a handler runs.
"""

from functools import wraps
from flask import request, current_app

from .helpers import extract_token


def _verify_request():
    from ..services import get_services

    identity = get_services().auth.verify(extract_token())
    request.user = identity
    return identity


def require_auth(f):
    """
    Decorator to require authentication for protected HTTP endpoints.

    The verified Identity is available to the handler as ``request.user``.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        _verify_request()
        return f(*args, **kwargs)

    return decorated_function


def auth_gate(flag: str):
    """
    Decorator that requires authentication only when config[flag] is true.

    With the flag off, a valid token is still attached as ``request.user``;
    an absent token leaves ``request.user`` as None. A token that is present
    but invalid is always rejected.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if current_app.config.get(flag) or extract_token():
                _verify_request()
            else:
                request.user = None
            return f(*args, **kwargs)

        return decorated_function

    return decorator
