"""
Business logic for dating profiles.

Profiles are stored in memory in creation order.  The owning user does
not have to be registered with ``UserService``; the profile simply
keeps a reference to whatever ``User`` it was given.
"""

import logging
from typing import List

from ..schemas.profile import Profile
from ..schemas.user import User

logger = logging.getLogger(__name__)


class ProfileService:
    """In‑memory store of profiles."""

    def __init__(self) -> None:
        self._profiles: List[Profile] = []

    def create_profile(self, user: User, age: int, bio: str) -> Profile:
        """Wrap ``user`` in a new profile with no interests and store it."""
        profile = Profile(user=user, age=age, bio=bio)
        self._profiles.append(profile)
        logger.debug("Created profile for user %s", user.id)
        return profile

    def list_profiles(self) -> List[Profile]:
        return list(self._profiles)
