"""
Pydantic model for direct messages between users.

Sender and recipient are references to stored ``User`` records, not
copies.  The timestamp defaults to the local time at construction.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .user import User


class Message(BaseModel):
    """A message sent from one user to another."""

    sender: User
    recipient: User
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)

    def __str__(self) -> str:
        return (
            f"From: {self.sender.name}, To: {self.recipient.name}, "
            f"Content: {self.content}, "
            f"Time: {self.timestamp.strftime('%Y-%m-%d %H:%M:%S')}"
        )
