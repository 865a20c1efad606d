"""
Authentication Service

Handles sign-in and JWT token management. Tokens are stateless: a token is
valid if its signature checks out against the server secret and it has not
expired. There is no server-side session or revocation list.
"""

import jwt
import datetime
from typing import Optional

from ..errors import InternalError, InvalidCredentialsError, UnauthorizedError
from ..models.token import Identity, TokenResult
from ..utils.api_logger import api_logger
from .user_service import UserService

ALGORITHM = "HS256"


class AuthService:
    """
    Authentication service for handling sign-in and token verification.
    """

    def __init__(self, user_service: UserService, jwt_secret: str, expiration_seconds: int = 3600):
        """
        Initialize the authentication service.

        Args:
            user_service: Credential store used at sign-in
            jwt_secret: Secret key for JWT signing and verification
            expiration_seconds: Lifetime of an issued token
        """
        if not jwt_secret:
            raise ValueError("JWT secret must be configured")
        self.user_service = user_service
        self.jwt_secret = jwt_secret
        self.expiration = datetime.timedelta(seconds=expiration_seconds)

    def issue_token(self, user_id: str, now: Optional[datetime.datetime] = None) -> TokenResult:
        """
        Sign a token for a user.

        Args:
            user_id: User's unique identifier
            now: Issuance time, defaults to the current UTC time

        Returns:
            TokenResult holding the token, or the signing error
        """
        issued_at = now or datetime.datetime.now(datetime.timezone.utc)
        expires_at = issued_at + self.expiration
        token_payload = {
            "user": {"id": user_id},
            "iat": issued_at,
            "exp": expires_at
        }

        try:
            token = jwt.encode(token_payload, self.jwt_secret, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            return TokenResult(error=f"Token signing failed: {e}")

        return TokenResult(token=token, expires_at=expires_at)

    def sign_in(self, email: str, password: str) -> TokenResult:
        """
        Authenticate a user and generate a JWT token.

        Args:
            email: User's email
            password: User's password

        Returns:
            TokenResult carrying the signed token

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
            InternalError: If the token could not be signed
        """
        user = self.user_service.verify_credentials(email, password)
        if user is None:
            raise InvalidCredentialsError()

        result = self.issue_token(user.id)
        if not result.ok:
            api_logger.logger.error(f"Sign-in for user {user.id} failed: {result.error}")
            raise InternalError()

        return result

    def verify(self, token: Optional[str], now: Optional[datetime.datetime] = None) -> Identity:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string
            now: Time to check expiry against, defaults to the current time

        Returns:
            Identity embedded in the token

        Raises:
            UnauthorizedError: If the token is absent, malformed, forged or expired
        """
        if not token:
            raise UnauthorizedError('No token, authorization denied')

        options = {"require": ["exp", "iat"]}
        if now is not None:
            options["verify_exp"] = False
            options["verify_iat"] = False

        try:
            payload = jwt.decode(token, self.jwt_secret, algorithms=[ALGORITHM], options=options)
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError('Token has expired')
        except jwt.InvalidTokenError:
            raise UnauthorizedError('Token not valid')

        if now is not None and payload["exp"] <= now.timestamp():
            raise UnauthorizedError('Token has expired')

        user = payload.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        if not user_id or not isinstance(user_id, str):
            raise UnauthorizedError('Token not valid')

        return Identity(
            user_id=user_id,
            issued_at=datetime.datetime.fromtimestamp(payload["iat"], datetime.timezone.utc),
            expires_at=datetime.datetime.fromtimestamp(payload["exp"], datetime.timezone.utc)
        )
