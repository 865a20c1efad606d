"""
Session Token Data Models

Contains the decoded identity carried by a token and the result of signing one.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Identity:
    """Verified identity attached to a protected request."""
    user_id: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class TokenResult:
    """Outcome of signing a token: either a token or the reason signing failed."""
    token: Optional[str] = None
    expires_at: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.token is not None
