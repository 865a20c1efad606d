"""
High Score Controller

Handles score submission and best-score lookup. Whether a token is needed
is decided by the HIGHSCORE_REQUIRE_AUTH setting.
"""

from flask import Blueprint, request, jsonify
from ..models.highscore import SubmitOutcome
from ..schemas import HighScoreSubmission, parse_body
from ..services import get_services
from ..utils.decorators import auth_gate
from ..utils.api_logger import api_logger

highscore_bp = Blueprint('highscore', __name__)

SUBMIT_RESPONSES = {
    SubmitOutcome.CREATED: (201, 'New high score created for user'),
    SubmitOutcome.UPDATED: (200, 'High score updated successfully'),
    SubmitOutcome.UNCHANGED: (200, 'High score not updated because an existing high score is lower or equal'),
}


@highscore_bp.route('', methods=['POST'])
@auth_gate('HIGHSCORE_REQUIRE_AUTH')
def submit_highscore():
    """Submit a finished game's move count."""
    services = get_services()

    api_logger.log_user_action(request, 'submit_highscore')
    body = parse_body(HighScoreSubmission, request.get_json(silent=True))

    outcome = services.highscores.submit(body.username, body.level, body.moves)
    status, message = SUBMIT_RESPONSES[outcome]

    response_data = {
        'success': True,
        'message': message,
        'outcome': outcome.value
    }
    api_logger.log_server_response(request, 'submit_highscore', True, response_data,
                                   level=body.level, moves=body.moves)

    if outcome is not SubmitOutcome.UNCHANGED:
        api_logger.log_event(
            f'highscore_{outcome.value}',
            getattr(request.user, 'user_id', None),
            username=body.username, level=body.level, moves=body.moves
        )

    return jsonify(response_data), status


@highscore_bp.route('/<level>', methods=['GET'])
@auth_gate('HIGHSCORE_REQUIRE_AUTH')
def get_highscore(level):
    """
    Get the best score for a level.

    Under the per-user key policy the player comes from the ``username``
    (or ``email``) query parameter, falling back to the signed-in user's name.
    """
    services = get_services()

    username = request.args.get('username') or request.args.get('email')
    if not username and request.user is not None:
        user = services.users.find_by_id(request.user.user_id)
        if user is not None:
            username = user.name

    api_logger.log_user_action(request, 'get_highscore', level=level, username=username)
    highscore = services.highscores.get_best(level, username)

    response_data = {
        'success': True,
        **highscore.to_dict()
    }
    api_logger.log_server_response(request, 'get_highscore', True, response_data)
    return jsonify(response_data)
