"""
Authentication Controller

Handles sign-in and current-user endpoints.
"""

from flask import Blueprint, request, jsonify
from ..errors import NotFoundError
from ..schemas import SignInRequest, parse_body
from ..services import get_services
from ..utils.decorators import require_auth
from ..utils.api_logger import api_logger
from .users_controller import register_user

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('', methods=['POST'])
@auth_bp.route('/signin', methods=['POST'])
def sign_in():
    """Authenticate a user and return a JWT token."""
    services = get_services()

    api_logger.log_user_action(request, 'sign_in')
    body = parse_body(SignInRequest, request.get_json(silent=True))

    result = services.auth.sign_in(body.email, body.password)

    response_data = {
        'success': True,
        'token': result.token,
        'expires_at': result.expires_at.isoformat()
    }
    api_logger.log_server_response(request, 'sign_in', True, response_data)
    return jsonify(response_data)


@auth_bp.route('/register', methods=['POST'])
def register():
    """Register a new user (alias of POST /api/users)."""
    return register_user()


@auth_bp.route('', methods=['GET'])
@require_auth
def current_user():
    """Return the signed-in user's profile, without the password."""
    services = get_services()

    api_logger.log_user_action(request, 'current_user')
    user = services.users.find_by_id(request.user.user_id)
    if user is None:
        raise NotFoundError('User not found')

    response_data = {
        'success': True,
        'user': user.to_public_dict()
    }
    api_logger.log_server_response(request, 'current_user', True, response_data)
    return jsonify(response_data)
