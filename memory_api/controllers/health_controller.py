"""
Health Controller

Liveness endpoints.
"""

from flask import Blueprint, current_app, request, jsonify
from ..services import get_services
from ..utils.api_logger import api_logger

health_bp = Blueprint('health', __name__)


@health_bp.route('/', methods=['GET'])
def index():
    """Root route for quick manual checks."""
    return 'API is running...'


@health_bp.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    services = get_services()

    try:
        services.db.command('ping')
        database_status = 'ok'
    except Exception as e:
        api_logger.log_error(request, e, 'health_check')
        database_status = 'unavailable'

    response_data = {
        'status': 'healthy' if database_status == 'ok' else 'degraded',
        'database': database_status,
        'highscore_key_policy': services.highscores.key_policy,
        'highscore_requires_auth': bool(current_app.config.get('HIGHSCORE_REQUIRE_AUTH'))
    }
    return jsonify(response_data)
