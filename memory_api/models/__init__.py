"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .highscore import HighScore, SubmitOutcome
from .history import GameRecord
from .token import Identity, TokenResult
from .user import User

__all__ = ['HighScore', 'SubmitOutcome', 'GameRecord', 'Identity', 'TokenResult', 'User']
