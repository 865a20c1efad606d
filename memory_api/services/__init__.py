"""
Services Package

Contains all business logic and service classes, plus the ServiceContext
that holds one instance of each for an application.
"""

from dataclasses import dataclass

from flask import current_app
from pymongo.database import Database

from ..config.rules import validate_key_policy
from .auth_service import AuthService
from .database import connect, ensure_indexes
from .highscore_service import HighScoreService
from .history_service import HistoryService
from .user_service import UserService

EXTENSION_KEY = 'memory_api'


@dataclass
class ServiceContext:
    """Everything a request handler needs, built once at startup."""
    db: Database
    users: UserService
    auth: AuthService
    highscores: HighScoreService
    history: HistoryService


def build_services(db: Database, config) -> ServiceContext:
    """
    Construct every service over one database handle.

    Args:
        db: Application database
        config: Mapping with the app configuration keys
    """
    key_policy = validate_key_policy(config['HIGHSCORE_KEY_POLICY'])
    ensure_indexes(db, key_policy)

    users = UserService(db, bcrypt_rounds=config['BCRYPT_ROUNDS'])
    auth = AuthService(users, config['JWT_SECRET'], config['JWT_EXPIRATION_SECONDS'])
    return ServiceContext(
        db=db,
        users=users,
        auth=auth,
        highscores=HighScoreService(db, key_policy),
        history=HistoryService(db)
    )


def get_services() -> ServiceContext:
    """Get the service context of the current application."""
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'AuthService', 'HighScoreService', 'HistoryService', 'UserService',
    'ServiceContext', 'build_services', 'connect', 'get_services', 'EXTENSION_KEY'
]
