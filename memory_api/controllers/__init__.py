"""
Controllers Package

Flask blueprints for every HTTP endpoint.
"""

from .auth_controller import auth_bp
from .health_controller import health_bp
from .highscore_controller import highscore_bp
from .history_controller import history_bp
from .users_controller import users_bp
from .error_handlers import register_error_handlers

__all__ = ['auth_bp', 'health_bp', 'highscore_bp', 'history_bp', 'users_bp', 'register_error_handlers']
