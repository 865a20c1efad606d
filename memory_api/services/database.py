"""
Database Connection

Creates the single MongoClient used by the process and the indexes the
services rely on for their uniqueness guarantees.
"""

import pymongo
from pymongo.database import Database
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..config.rules import KEY_POLICY_LEVEL
from ..utils.api_logger import api_logger

USERS = 'users'
HIGHSCORES = 'highscores'
HISTORY = 'games'


def connect(mongo_uri: str, db_name: str) -> Database:
    """
    Connect to MongoDB and return the application database.

    Args:
        mongo_uri: MongoDB connection string
        db_name: Database name

    Raises:
        pymongo.errors.PyMongoError: If the server cannot be reached
    """
    client = MongoClient(mongo_uri, server_api=ServerApi('1'), tz_aware=True)
    try:
        client.admin.command('ping')
    except Exception:
        client.close()
        raise
    api_logger.logger.info(f"Connected to MongoDB database '{db_name}'")
    return client[db_name]


def ensure_indexes(db: Database, key_policy: str) -> None:
    """
    Create the indexes backing the uniqueness invariants.

    Args:
        db: Application database
        key_policy: High score key policy ("user_level" or "level")
    """
    db[USERS].create_index('email', unique=True)

    if key_policy == KEY_POLICY_LEVEL:
        db[HIGHSCORES].create_index('level', unique=True, name='highscore_key')
    else:
        db[HIGHSCORES].create_index(
            [('username', pymongo.ASCENDING), ('level', pymongo.ASCENDING)],
            unique=True,
            name='highscore_key'
        )

    db[HISTORY].create_index([('user_id', pymongo.ASCENDING), ('date', pymongo.DESCENDING)])
