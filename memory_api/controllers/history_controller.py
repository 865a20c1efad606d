"""
History Controller

Handles the signed-in user's game history endpoints.
"""

from flask import Blueprint, request, jsonify
from ..schemas import HistoryEntryRequest, parse_body
from ..services import get_services
from ..utils.decorators import require_auth
from ..utils.api_logger import api_logger

history_bp = Blueprint('history', __name__)


@history_bp.route('', methods=['GET'])
@require_auth
def list_history():
    """List the user's games, newest first."""
    services = get_services()

    api_logger.log_user_action(request, 'list_history')
    games = services.history.list_for(request.user.user_id)

    api_logger.log_server_response(request, 'list_history', True, {'count': len(games)})
    return jsonify([game.to_dict() for game in games])


@history_bp.route('', methods=['POST'])
@require_auth
def add_history():
    """Record a completed game."""
    services = get_services()

    api_logger.log_user_action(request, 'add_history')
    body = parse_body(HistoryEntryRequest, request.get_json(silent=True))

    game = services.history.append(request.user.user_id, body.game_level, body.num_of_moves)

    response_data = game.to_dict()
    api_logger.log_server_response(request, 'add_history', True, response_data)
    return jsonify(response_data)


@history_bp.route('', methods=['DELETE'])
@require_auth
def clear_history():
    """Delete all of the user's games."""
    services = get_services()

    api_logger.log_user_action(request, 'clear_history')
    deleted = services.history.clear_for(request.user.user_id)

    response_data = {
        'success': True,
        'message': 'User history cleared successfully',
        'deleted': deleted
    }
    api_logger.log_server_response(request, 'clear_history', True, response_data)
    api_logger.log_event('history_cleared', request.user.user_id, deleted=deleted)
    return jsonify(response_data)
