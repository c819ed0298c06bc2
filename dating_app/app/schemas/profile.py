"""
Pydantic model for dating profiles.

A profile wraps a ``User`` together with an age, a free‑form bio and an
ordered list of interests.  Interests are plain strings compared by
exact equality; duplicates are allowed.
"""

from typing import List

from pydantic import BaseModel, Field

from .user import User


class Profile(BaseModel):
    """Dating profile of a single user."""

    user: User
    age: int
    bio: str
    interests: List[str] = Field(default_factory=list)

    def add_interest(self, interest: str) -> None:
        self.interests.append(interest)

    def get_interests(self) -> List[str]:
        """Return a copy of the interests so callers cannot mutate the profile."""
        return list(self.interests)

    def match(self, other: "Profile") -> int:
        """Return the number of distinct interests shared with ``other``.

        Duplicates are counted once, which keeps the score symmetric:
        ``a.match(b) == b.match(a)``.
        """
        return len(set(self.interests) & set(other.interests))
