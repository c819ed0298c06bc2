"""
Façade over the per‑domain services.

``DatingService`` is the single entry point used by the demo.  It owns
one ``UserService``, ``ProfileService`` and ``MessageService`` and
delegates matching to ``MatchService`` over every stored profile.  All
state lives in memory and is lost when the instance goes away.
"""

from typing import List, Optional, Tuple

from ..schemas.message import Message
from ..schemas.profile import Profile
from ..schemas.user import User, UserCreate
from .match_service import MatchService
from .message_service import MessageService
from .profile_service import ProfileService
from .user_service import UserService


class DatingService:
    """Users, profiles, messages and matching in one object."""

    def __init__(self) -> None:
        self.users = UserService()
        self.profiles = ProfileService()
        self.messages = MessageService(self.users)

    def create_user(self, name: str, email: str, password: str) -> User:
        return self.users.create_user(UserCreate(name=name, email=email, password=password))

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get_user_by_id(user_id)

    def list_users(self) -> List[User]:
        return self.users.list_users()

    def authenticate(self, email: str, password: str) -> Optional[User]:
        return self.users.authenticate(email, password)

    def create_profile(self, user: User, age: int, bio: str) -> Profile:
        return self.profiles.create_profile(user, age, bio)

    def list_profiles(self) -> List[Profile]:
        return self.profiles.list_profiles()

    def send_message(self, sender: User, recipient_id: int, content: str) -> Optional[Message]:
        """Send a message; returns ``None`` when the recipient is unknown."""
        return self.messages.send_message(sender, recipient_id, content)

    def get_messages(self, user_id: int) -> List[Message]:
        return self.messages.get_messages(user_id)

    def find_matches(self, profile: Profile, min_score: int) -> List[Profile]:
        """Match ``profile`` against every stored profile."""
        return MatchService.find_matches(profile, self.profiles.list_profiles(), min_score)

    def find_scored_matches(self, profile: Profile, min_score: int) -> List[Tuple[Profile, int]]:
        return MatchService.score_matches(profile, self.profiles.list_profiles(), min_score)
