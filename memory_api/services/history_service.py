"""
History Service

Append-only log of completed games per user, with a bulk clear.
"""

import datetime
from typing import List

import pymongo
from pymongo.database import Database

from ..config.rules import MIN_HISTORY_MOVES
from ..errors import ValidationError
from ..models.history import GameRecord
from .database import HISTORY


class HistoryService:
    """Service owning the games collection."""

    def __init__(self, db: Database):
        self.games_collection = db[HISTORY]

    def append(self, user_id: str, level: str, moves: int) -> GameRecord:
        """
        Record a completed game.

        Raises:
            ValidationError: If level is empty or moves is not a positive integer
        """
        errors = []
        if not isinstance(level, str) or not level.strip():
            errors.append({'field': 'gameLevel', 'message': 'Game level is required'})
        if isinstance(moves, bool) or not isinstance(moves, int) or moves < MIN_HISTORY_MOVES:
            errors.append({'field': 'numOfMoves', 'message': 'Number of moves must be a valid number'})
        if errors:
            raise ValidationError('Invalid game record', errors)

        game_doc = {
            "user_id": user_id,
            "level": level.strip(),
            "moves": moves,
            "date": datetime.datetime.now(datetime.timezone.utc)
        }
        result = self.games_collection.insert_one(game_doc)
        game_doc["_id"] = result.inserted_id
        return GameRecord.from_document(game_doc)

    def list_for(self, user_id: str) -> List[GameRecord]:
        """All of a user's games, newest first."""
        cursor = self.games_collection.find({"user_id": user_id}).sort(
            [("date", pymongo.DESCENDING), ("_id", pymongo.DESCENDING)]
        )
        return [GameRecord.from_document(doc) for doc in cursor]

    def clear_for(self, user_id: str) -> int:
        """Delete all of a user's games. Returns how many were removed."""
        result = self.games_collection.delete_many({"user_id": user_id})
        return result.deleted_count
