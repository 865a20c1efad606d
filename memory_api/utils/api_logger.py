"""
API Logger Module for the Memory Game Server

This module provides structured logging for user actions, server responses,
game events and errors. Entries are JSON so they can be parsed later.
"""

import logging
import json
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from pathlib import Path

SENSITIVE_FIELDS = frozenset({'password', 'token', 'x-auth-token', 'authorization'})
MASK = '***'


class ApiLogger:
    """
    Centralized logging system for the memory game API.

    Features:
    - User action tracking with IP/user identification
    - Server response logging
    - Game event logging (scores, history)
    - JSON structured logs for easy parsing
    - Passwords and tokens masked before anything is written
    """

    def __init__(self, name: str = 'memory_api'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger(name)

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO') -> logging.Logger:
        """
        Attach handlers to the logger.

        Args:
            log_dir: Directory for the daily log file; None logs to console only
            level: Minimum level written to the file
        """
        self.logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        if self.logger.handlers:
            self.logger.handlers.clear()

        if log_dir:
            self.log_dir = Path(log_dir)
            self.log_dir.mkdir(parents=True, exist_ok=True)

            # Create log file with date
            file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(file_handler)
        else:
            self.log_dir = None

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        self.logger.addHandler(console_handler)

        return self.logger

    def _log_file(self) -> Path:
        return self.log_dir / f"api_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        """Extract user identity information from request."""
        identity = getattr(request, 'user', None)
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'user_id': getattr(identity, 'user_id', None)
        }

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Any],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': self.sanitize(details)
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def sanitize(self, data: Any) -> Any:
        """Return a copy of data with sensitive values masked."""
        if isinstance(data, dict):
            return {
                key: MASK if str(key).lower() in SENSITIVE_FIELDS else self.sanitize(value)
                for key, value in data.items()
            }
        if isinstance(data, (list, tuple)):
            return [self.sanitize(item) for item in data]
        return data

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'register', 'submit_highscore')
            **kwargs: Additional details to log
        """
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'path': request.path,
            **kwargs
        }
        log_message = self._create_log_entry('USER_ACTION', action, self._get_user_identity(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': response_data,
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, self._get_user_identity(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_event(self, event: str, user_id: Optional[str] = None, **kwargs):
        """
        Log domain events (new high score, history cleared, etc.).

        Args:
            event: Type of event (e.g., 'highscore_updated')
            user_id: Acting user, when known
            **kwargs: Additional event details
        """
        user_info = {'user_ip': None, 'user_id': user_id}
        log_message = self._create_log_entry('GAME_EVENT', event, user_info, kwargs)
        self.logger.info(log_message)

    def log_error(self, request, error: Exception, action: str):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'path': getattr(request, 'path', None)
        }
        log_message = self._create_log_entry('ERROR', action, self._get_user_identity(request), details)
        self.logger.error(log_message)


# Global logger instance
api_logger = ApiLogger()
