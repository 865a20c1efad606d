"""
Schemas Package

Request body models and the helper that turns pydantic failures into
field-level ValidationError details.
"""

from typing import Any, Dict, List, Type, TypeVar

import pydantic

from ..errors import ValidationError
from .requests import (
    HighScoreSubmission, HistoryEntryRequest, RegisterRequest,
    SignInRequest, UserUpdateRequest
)

SchemaT = TypeVar('SchemaT', bound=pydantic.BaseModel)


def field_errors(exc: pydantic.ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into [{field, message}] entries."""
    errors = []
    for error in exc.errors():
        field = '.'.join(str(part) for part in error['loc']) or 'body'
        errors.append({'field': field, 'message': error['msg']})
    return errors


def parse_body(schema: Type[SchemaT], data: Any) -> SchemaT:
    """
    Validate a decoded JSON body against a request schema.

    Raises:
        ValidationError: If the body is missing, not an object, or fails the schema
    """
    if not isinstance(data, dict):
        raise ValidationError('Request body is required',
                              [{'field': 'body', 'message': 'Expected a JSON object'}])
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError('Validation failed', field_errors(exc)) from exc


__all__ = [
    'HighScoreSubmission', 'HistoryEntryRequest', 'RegisterRequest',
    'SignInRequest', 'UserUpdateRequest', 'field_errors', 'parse_body'
]
