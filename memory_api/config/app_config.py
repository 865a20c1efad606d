"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name: str, default: str) -> list:
    return [item.strip() for item in os.getenv(name, default).split(',') if item.strip()]


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG', 'False')

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 8080))

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'memory_game')

    # Authentication Settings
    JWT_SECRET = os.getenv('JWT_SECRET')
    JWT_EXPIRATION_SECONDS = int(os.getenv('JWT_EXPIRATION_SECONDS', 3600))
    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', 10))
    PROTECT_USER_ROUTES = _env_flag('PROTECT_USER_ROUTES', 'True')

    # High Score Settings
    HIGHSCORE_KEY_POLICY = os.getenv('HIGHSCORE_KEY_POLICY', 'user_level')
    HIGHSCORE_REQUIRE_AUTH = _env_flag('HIGHSCORE_REQUIRE_AUTH', 'False')

    # Cross-origin Settings
    CORS_ORIGINS = _env_list(
        'CORS_ORIGINS',
        'https://memory-frontend-delta.vercel.app,http://localhost:3000'
    )

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    JWT_SECRET = 'test-jwt-secret'
    BCRYPT_ROUNDS = 4
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
