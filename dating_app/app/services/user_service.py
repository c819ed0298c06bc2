"""
Business logic for users.

The ``UserService`` stores users in memory and provides basic
operations.  Password handling is not secure: passwords are stored in
plain text and compared by equality.
"""

import logging
from typing import List, Optional

from ..schemas.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Registry of users held in an in‑memory list.

    Ids are assigned from the list length, so the n‑th registered user
    always gets id ``n``.  Users are never removed, which keeps ids
    unique.
    """

    def __init__(self) -> None:
        self._users: List[User] = []

    def create_user(self, data: UserCreate) -> User:
        """Register a new user and return the stored record.

        No validation is performed: duplicate e‑mails and empty names
        are accepted as given.
        """
        user = User(
            id=len(self._users) + 1,
            name=data.name,
            email=data.email,
            password=data.password,
        )
        self._users.append(user)
        logger.info("Registered user %s (id=%s)", user.email, user.id)
        return user

    def list_users(self) -> List[User]:
        """Return all users in registration order."""
        return list(self._users)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve a user by ID, or ``None`` if no such user exists."""
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the first user with ``email`` whose password matches."""
        for user in self._users:
            if user.email == email and user.verify_password(password):
                return user
        return None
