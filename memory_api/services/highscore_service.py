"""
High Score Service

Keeps the best (lowest) move count per key. The key is either
(username, level) or level alone, depending on the configured policy.
A stored score never gets worse.
"""

import datetime
from typing import Any, Dict, Optional

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from ..config.rules import KEY_POLICY_LEVEL, MIN_HIGHSCORE_MOVES, validate_key_policy
from ..errors import NotFoundError, ValidationError
from ..models.highscore import HighScore, SubmitOutcome
from .database import HIGHSCORES


class HighScoreService:
    """
    Ledger of best scores.

    Uniqueness of the key is enforced by the unique index created in
    database.ensure_indexes; this class never takes a lock.
    """

    def __init__(self, db: Database, key_policy: str):
        self.highscores_collection = db[HIGHSCORES]
        self.key_policy = validate_key_policy(key_policy)

    @property
    def per_level(self) -> bool:
        return self.key_policy == KEY_POLICY_LEVEL

    def _key(self, username: Optional[str], level: str) -> Dict[str, Any]:
        if self.per_level:
            return {"level": level}
        return {"username": username, "level": level}

    def _lookup(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.highscores_collection.find_one(key)

    def submit(self, username: str, level: str, moves: int) -> SubmitOutcome:
        """
        Record a finished game and keep it if it beats the stored score.

        Args:
            username: Player submitting the score
            level: Level identifier
            moves: Number of moves used; fewer is better

        Returns:
            CREATED for a new key, UPDATED when the stored score improved,
            UNCHANGED when the stored score was equal or better

        Raises:
            ValidationError: If any argument is empty or moves is not a non-negative integer
        """
        errors = []
        if not isinstance(username, str) or not username.strip():
            errors.append({'field': 'username', 'message': 'Username is required'})
        if not isinstance(level, str) or not level.strip():
            errors.append({'field': 'level', 'message': 'Level is required'})
        if isinstance(moves, bool) or not isinstance(moves, int) or moves < MIN_HIGHSCORE_MOVES:
            errors.append({'field': 'moves', 'message': 'Moves must be a non-negative integer'})
        if errors:
            raise ValidationError('Invalid high score submission', errors)

        username = username.strip()
        level = level.strip()
        key = self._key(username, level)
        now = datetime.datetime.now(datetime.timezone.utc)

        if self._lookup(key) is None:
            try:
                self.highscores_collection.insert_one({
                    "username": username,
                    "level": level,
                    "moves": moves,
                    "created_at": now,
                    "updated_at": now
                })
                return SubmitOutcome.CREATED
            except DuplicateKeyError:
                # A concurrent submission created the key first; compete as an update
                pass

        changes = {"moves": moves, "updated_at": now}
        if self.per_level:
            changes["username"] = username

        result = self.highscores_collection.update_one(
            {**key, "moves": {"$gt": moves}},
            {"$set": changes}
        )
        if result.modified_count:
            return SubmitOutcome.UPDATED
        return SubmitOutcome.UNCHANGED

    def get_best(self, level: str, username: Optional[str] = None) -> HighScore:
        """
        Fetch the stored best score.

        Args:
            level: Level identifier
            username: Player; required under the per-user policy, ignored otherwise

        Raises:
            ValidationError: If the per-user policy is active and no username is given
            NotFoundError: If nothing has been recorded for the key
        """
        if not self.per_level and not username:
            raise ValidationError('Username is required',
                                  [{'field': 'username', 'message': 'Username is required'}])

        doc = self._lookup(self._key(username, level))
        if doc is None:
            raise NotFoundError('No high score yet')
        return HighScore.from_document(doc)
