"""
Users Controller

Handles registration and profile management endpoints.
"""

from flask import Blueprint, request, jsonify
from ..errors import InternalError, NotFoundError
from ..schemas import RegisterRequest, UserUpdateRequest, parse_body
from ..services import get_services
from ..utils.decorators import auth_gate
from ..utils.api_logger import api_logger

users_bp = Blueprint('users', __name__)


def _check_owner(user_id):
    """A signed-in caller may only change their own record."""
    identity = getattr(request, 'user', None)
    if identity is not None and identity.user_id != user_id:
        raise NotFoundError('User not found')


def register_user():
    """Shared by POST /api/users and POST /api/auth/register."""
    services = get_services()

    api_logger.log_user_action(request, 'register')
    body = parse_body(RegisterRequest, request.get_json(silent=True))

    user_id = services.users.register(body.name, body.email, body.password)

    token_result = services.auth.issue_token(user_id)
    if not token_result.ok:
        api_logger.logger.error(f"Registered user {user_id} but could not sign a token: {token_result.error}")
        raise InternalError()

    response_data = {
        'success': True,
        'message': 'User registered successfully',
        'user_id': user_id,
        'token': token_result.token
    }
    api_logger.log_server_response(request, 'register', True, response_data)
    return jsonify(response_data), 201


@users_bp.route('', methods=['POST'])
def register():
    """Register a new user."""
    return register_user()


@users_bp.route('/<user_id>', methods=['PUT'])
@auth_gate('PROTECT_USER_ROUTES')
def update_user(user_id):
    """Update a user's name, email or password."""
    services = get_services()

    api_logger.log_user_action(request, 'update_user', target_user=user_id)
    _check_owner(user_id)
    body = parse_body(UserUpdateRequest, request.get_json(silent=True))

    user = services.users.update(user_id, name=body.name, email=body.email, password=body.password)

    response_data = {
        'success': True,
        'message': 'User updated successfully',
        'user': user.to_public_dict()
    }
    api_logger.log_server_response(request, 'update_user', True, response_data)
    return jsonify(response_data)


@users_bp.route('/<user_id>', methods=['DELETE'])
@auth_gate('PROTECT_USER_ROUTES')
def delete_user(user_id):
    """Delete a user."""
    services = get_services()

    api_logger.log_user_action(request, 'delete_user', target_user=user_id)
    _check_owner(user_id)
    services.users.remove(user_id)

    response_data = {
        'success': True,
        'message': 'User deleted successfully'
    }
    api_logger.log_server_response(request, 'delete_user', True, response_data)
    return jsonify(response_data)
