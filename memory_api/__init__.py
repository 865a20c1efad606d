"""
Memory Game API Application Package

Backend for the memory/matching game: user accounts, JWT sign-in,
per-user game history and best-score tracking per level.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config
from .services import EXTENSION_KEY, build_services, connect
from .utils.api_logger import api_logger


def create_app(config_class=Config, database=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        database: Optional pymongo-compatible database; when omitted one is
            opened from MONGO_URI

    Returns:
        Flask application instance with all services initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    api_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    if not app.config.get('JWT_SECRET'):
        raise RuntimeError('JWT_SECRET is not configured')

    if database is None:
        if not app.config.get('MONGO_URI'):
            raise RuntimeError('MONGO_URI is not configured')
        database = connect(app.config['MONGO_URI'], app.config['MONGO_DB_NAME'])

    # One context per app, reached through get_services()
    app.extensions[EXTENSION_KEY] = build_services(database, app.config)

    # Initialize extensions
    CORS(
        app,
        origins=app.config['CORS_ORIGINS'],
        methods=['GET', 'POST', 'PUT', 'DELETE'],
        allow_headers=['Content-Type', 'Authorization', 'x-auth-token'],
        supports_credentials=True
    )

    # Register blueprints
    from .controllers import (
        auth_bp, health_bp, highscore_bp, history_bp, users_bp, register_error_handlers
    )

    app.register_blueprint(health_bp)
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(history_bp, url_prefix='/api/history')
    app.register_blueprint(highscore_bp, url_prefix='/api/highscore')

    register_error_handlers(app)

    api_logger.logger.info(
        f"Application created (highscore policy: {app.config['HIGHSCORE_KEY_POLICY']}, "
        f"highscore auth: {app.config['HIGHSCORE_REQUIRE_AUTH']})"
    )
    return app
