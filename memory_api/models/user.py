"""
User Data Models

Contains user-related data structures.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from datetime import datetime


@dataclass
class User:
    """User data model. The password field only ever holds a bcrypt hash."""
    id: str
    name: str
    email: str
    password: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> 'User':
        return cls(
            id=str(doc['_id']),
            name=doc.get('name', ''),
            email=doc['email'],
            password=doc['password'],
            created_at=doc.get('created_at'),
            updated_at=doc.get('updated_at')
        )

    def to_public_dict(self) -> Dict[str, Any]:
        """Projection safe to return to clients (no password)."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }
