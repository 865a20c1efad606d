"""
High Score Data Models

Contains the stored best-score record and the outcome of a submission.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class SubmitOutcome(Enum):
    """What a score submission did to the ledger."""
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass
class HighScore:
    """Best (lowest) move count recorded for a key."""
    username: str
    level: str
    moves: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> 'HighScore':
        return cls(
            username=doc['username'],
            level=doc['level'],
            moves=doc['moves'],
            created_at=doc.get('created_at'),
            updated_at=doc.get('updated_at')
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'username': self.username,
            'level': self.level,
            'moves': self.moves,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }
