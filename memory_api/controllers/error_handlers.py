"""
Error Handlers

Turns every failure into a JSON response. APIError subclasses carry their
own status; database and unexpected failures become a generic 500 with the
detail written to the log only.
"""

from flask import jsonify, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

from ..errors import APIError, InternalError
from ..utils.api_logger import api_logger


def handle_api_error(error: APIError):
    response_data = error.to_dict()
    api_logger.log_server_response(request, request.endpoint or 'unknown', False, response_data,
                                   status_code=error.status_code)
    return jsonify(response_data), error.status_code


def handle_database_error(error: PyMongoError):
    api_logger.log_error(request, error, request.endpoint or 'unknown')
    return jsonify(InternalError().to_dict()), 500


def handle_http_error(error: HTTPException):
    if error.code is None or error.code < 400:
        # Routing redirects pass through untouched
        return error
    messages = {404: 'Not found', 405: 'Method not allowed'}
    response_data = {
        'success': False,
        'error': messages.get(error.code, error.name),
        'code': error.name.upper().replace(' ', '_')
    }
    return jsonify(response_data), error.code


def handle_unexpected_error(error: Exception):
    api_logger.log_error(request, error, request.endpoint or 'unknown')
    return jsonify(InternalError().to_dict()), 500


def register_error_handlers(app):
    """Register all error handlers on the app."""
    app.register_error_handler(APIError, handle_api_error)
    app.register_error_handler(PyMongoError, handle_database_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
