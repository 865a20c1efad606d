"""
Request Body Schemas

One pydantic model per operation. Type and range checks happen here, once,
before any service or database call.
"""

from typing import Annotated, Optional

from pydantic import (
    BaseModel, ConfigDict, EmailStr, Field, StrictInt, StrictStr,
    StringConstraints, field_validator
)

from ..config.rules import (
    MAX_PASSWORD_BYTES, MIN_HIGHSCORE_MOVES, MIN_HISTORY_MOVES, MIN_PASSWORD_LENGTH
)

# Names are trimmed; passwords are kept exactly as typed
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


def _check_password_bytes(value: Optional[str]) -> Optional[str]:
    # bcrypt only looks at the first 72 bytes
    if value is not None and len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValueError(f'Password must be at most {MAX_PASSWORD_BYTES} bytes')
    return value


class RegisterRequest(BaseModel):
    """Body for POST /api/users and POST /api/auth/register."""

    name: Name
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, value):
        return _check_password_bytes(value)


class SignInRequest(BaseModel):
    """Body for POST /api/auth and POST /api/auth/signin."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class UserUpdateRequest(BaseModel):
    """Body for PUT /api/users/<id>. Omitted fields are left unchanged."""

    name: Optional[Name] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=MIN_PASSWORD_LENGTH)

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, value):
        return _check_password_bytes(value)


class HistoryEntryRequest(BaseModel):
    """Body for POST /api/history."""

    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    game_level: str = Field(alias='gameLevel', min_length=1, max_length=50)
    num_of_moves: int = Field(alias='numOfMoves', ge=MIN_HISTORY_MOVES)

    @field_validator('num_of_moves', mode='before')
    @classmethod
    def reject_booleans(cls, value):
        # Numeric strings are fine, true/false are not
        if isinstance(value, bool):
            raise ValueError('Number of moves must be a valid number')
        return value


class HighScoreSubmission(BaseModel):
    """Body for POST /api/highscore."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: StrictStr = Field(min_length=1, max_length=100)
    level: StrictStr = Field(min_length=1, max_length=50)
    moves: StrictInt = Field(ge=MIN_HIGHSCORE_MOVES)
