"""
Pydantic models for the records kept by the services.

Each domain (users, profiles, messages) defines its own models.  The
services hold these objects directly in memory; there is no separate
persistence representation.
"""

from .user import User, UserCreate  # noqa: F401
from .profile import Profile  # noqa: F401
from .message import Message  # noqa: F401
