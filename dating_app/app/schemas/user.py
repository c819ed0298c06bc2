"""
Pydantic models for user data.

Defines the payload for registering a user and the stored user record.
Passwords are kept in plain text and compared by equality; they are
excluded from ``repr`` and from ``model_dump`` so they never end up in
logs or printed output.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: str = Field(..., examples=["Alice"])
    email: str = Field(..., examples=["alice@example.com"])
    password: str = Field(..., repr=False, examples=["password123"])


class User(BaseModel):
    """A registered user.

    ``id`` is assigned by ``UserService`` and equals the 1‑based
    position of the user in registration order.
    """

    id: int
    name: str
    email: str
    password: str = Field(..., repr=False, exclude=True)

    def verify_password(self, candidate: str) -> bool:
        """Return ``True`` if ``candidate`` equals the stored password."""
        return self.password == candidate
