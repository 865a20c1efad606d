"""
API Error Classes

Every failure a service can report maps onto one of these classes. The
application's error handlers turn them into JSON responses with the
matching HTTP status code.
"""

from typing import Dict, List, Optional


class APIError(Exception):
    """
    Base class for API errors.

    Attributes:
        code: Machine-readable error code (e.g. "NOT_FOUND")
        message: Human-readable error message
        status_code: HTTP status code to return
        details: Optional list of field-level error details
    """

    def __init__(self,
                 code: str,
                 message: str,
                 status_code: int = 500,
                 details: Optional[List[Dict[str, str]]] = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)

    def to_dict(self) -> Dict:
        body = {
            'success': False,
            'error': self.message,
            'code': self.code
        }
        if self.details:
            body['errors'] = self.details
        return body


class ValidationError(APIError):
    """Malformed or missing input (400)."""

    def __init__(self, message: str = 'Validation failed',
                 details: Optional[List[Dict[str, str]]] = None):
        super().__init__('VALIDATION_ERROR', message, 400, details)


class ConflictError(APIError):
    """Duplicate value for a unique key (400)."""

    def __init__(self, message: str):
        super().__init__('CONFLICT', message, 400)


class InvalidCredentialsError(APIError):
    """
    Sign-in failed (400).

    The message never says whether the email or the password was wrong.
    """

    def __init__(self):
        super().__init__('INVALID_CREDENTIALS', 'Invalid credentials', 400)


class UnauthorizedError(APIError):
    """Missing, malformed, expired or forged token (401)."""

    def __init__(self, message: str = 'No token, authorization denied'):
        super().__init__('UNAUTHORIZED', message, 401)


class NotFoundError(APIError):
    """Unknown id or record (404)."""

    def __init__(self, message: str = 'Resource not found'):
        super().__init__('NOT_FOUND', message, 404)


class InternalError(APIError):
    """Persistence or unexpected failure (500). Detail stays in the server log."""

    def __init__(self, message: str = 'Something went wrong on the server'):
        super().__init__('INTERNAL_ERROR', message, 500)
