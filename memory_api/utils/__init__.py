"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_auth, auth_gate
from .helpers import extract_token
from .api_logger import api_logger

__all__ = ['require_auth', 'auth_gate', 'extract_token', 'api_logger']
