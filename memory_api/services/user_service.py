"""
User Service

Credential store: registration, lookup, profile update and removal of
user records, with bcrypt password hashing.
"""

import datetime
from typing import Optional

import bcrypt
from bson.objectid import ObjectId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from ..config.rules import MAX_PASSWORD_BYTES
from ..errors import ConflictError, NotFoundError, ValidationError
from ..models.user import User
from .database import USERS


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    if isinstance(user_id, ObjectId):
        return user_id
    if not user_id or not ObjectId.is_valid(user_id):
        return None
    return ObjectId(user_id)


class UserService:
    """
    Service owning the users collection.
    """

    def __init__(self, db: Database, bcrypt_rounds: int = 10):
        """
        Args:
            db: Application database
            bcrypt_rounds: bcrypt work factor used for new hashes
        """
        self.users_collection = db[USERS]
        self.bcrypt_rounds = bcrypt_rounds
        # Compared against when the email is unknown so a failed sign-in costs
        # the same bcrypt round trip either way
        self._dummy_hash = self.hash_password("memory-api-dummy")

    def hash_password(self, password: str) -> str:
        """
        Hash a password using bcrypt with a fresh random salt.

        Args:
            password: Plain text password

        Returns:
            Hashed password as string

        Raises:
            ValidationError: If the password is longer than bcrypt accepts
        """
        encoded = password.encode('utf-8')
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError('Password is too long', [
                {'field': 'password', 'message': f'Password must be at most {MAX_PASSWORD_BYTES} bytes'}
            ])
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        hashed = bcrypt.hashpw(encoded, salt)
        return hashed.decode('utf-8')

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Returns:
            True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            # Not a bcrypt hash, or a password longer than bcrypt accepts
            return False

    def register(self, name: str, email: str, password: str) -> str:
        """
        Register a new user.

        Args:
            name: Display name
            email: Email address, unique across users
            password: Plain text password (already length-checked by the schema)

        Returns:
            The new user's id

        Raises:
            ConflictError: If the email is already registered
        """
        email = _normalize_email(email)

        if self.users_collection.find_one({"email": email}, {"_id": 1}):
            raise ConflictError('Email already exists')

        now = datetime.datetime.now(datetime.timezone.utc)
        user_doc = {
            "name": name.strip(),
            "email": email,
            "password": self.hash_password(password),
            "created_at": now,
            "updated_at": now
        }

        try:
            result = self.users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            # Lost a race with a concurrent registration for the same email
            raise ConflictError('Email already exists')

        return str(result.inserted_id)

    def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        doc = self.users_collection.find_one({"email": _normalize_email(email)})
        return User.from_document(doc) if doc else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        doc = self.users_collection.find_one({"_id": object_id})
        return User.from_document(doc) if doc else None

    def verify_credentials(self, email: str, password: str) -> Optional[User]:
        """
        Look up a user by email and check the password.

        Returns:
            The user when both match, None otherwise
        """
        user = self.find_by_email(email)
        if user is None:
            self.verify_password(password, self._dummy_hash)
            return None
        if not self.verify_password(password, user.password):
            return None
        return user

    def update(self,
               user_id: str,
               name: Optional[str] = None,
               email: Optional[str] = None,
               password: Optional[str] = None) -> User:
        """
        Update the provided profile fields; anything left as None is unchanged.

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        object_id = _to_object_id(user_id)
        if object_id is None or not self.users_collection.find_one({"_id": object_id}, {"_id": 1}):
            raise NotFoundError('User not found')

        changes = {}
        if name:
            changes["name"] = name.strip()
        if email:
            email = _normalize_email(email)
            owner = self.users_collection.find_one({"email": email}, {"_id": 1})
            if owner and owner["_id"] != object_id:
                raise ConflictError('Email already exists')
            changes["email"] = email
        if password:
            changes["password"] = self.hash_password(password)

        if changes:
            changes["updated_at"] = datetime.datetime.now(datetime.timezone.utc)
            try:
                self.users_collection.update_one({"_id": object_id}, {"$set": changes})
            except DuplicateKeyError:
                raise ConflictError('Email already exists')

        user = self.find_by_id(str(object_id))
        if user is None:
            raise NotFoundError('User not found')
        return user

    def remove(self, user_id: str) -> None:
        """
        Delete a user.

        Raises:
            NotFoundError: If the user does not exist
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            raise NotFoundError('User not found')

        result = self.users_collection.delete_one({"_id": object_id})
        if result.deleted_count == 0:
            raise NotFoundError('User not found')
