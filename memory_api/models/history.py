"""
Game History Data Models

One record per completed game attempt.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass
class GameRecord:
    """A finished game as stored in the history collection."""
    id: str
    user_id: str
    level: str
    moves: int
    date: datetime

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> 'GameRecord':
        return cls(
            id=str(doc['_id']),
            user_id=doc['user_id'],
            level=doc['level'],
            moves=doc['moves'],
            date=doc['date']
        )

    def to_dict(self) -> Dict[str, Any]:
        # Field names match the game client
        return {
            'id': self.id,
            'user': self.user_id,
            'gameLevel': self.level,
            'numOfMoves': self.moves,
            'date': self.date.isoformat()
        }
