"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- rules.py: Validation rules and scoring constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .rules import (
    MIN_PASSWORD_LENGTH, MAX_PASSWORD_BYTES, MIN_HISTORY_MOVES, MIN_HIGHSCORE_MOVES,
    KEY_POLICY_USER_LEVEL, KEY_POLICY_LEVEL, KEY_POLICIES
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Rules
    'MIN_PASSWORD_LENGTH', 'MAX_PASSWORD_BYTES', 'MIN_HISTORY_MOVES', 'MIN_HIGHSCORE_MOVES',
    'KEY_POLICY_USER_LEVEL', 'KEY_POLICY_LEVEL', 'KEY_POLICIES'
]
