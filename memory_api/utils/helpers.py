"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Optional
from flask import request


def extract_token(request_obj=None) -> Optional[str]:
    """
    Read the session token from a request.

    Accepts either an ``x-auth-token`` header or ``Authorization: Bearer <token>``.
    """
    if request_obj is None:
        request_obj = request

    token = request_obj.headers.get('x-auth-token')
    if token:
        return token.strip() or None

    auth_header = request_obj.headers.get('Authorization', '')
    scheme, _, credentials = auth_header.partition(' ')
    if scheme.lower() == 'bearer' and credentials.strip():
        return credentials.strip()
    return None
