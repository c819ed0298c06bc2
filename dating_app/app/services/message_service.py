"""
Service layer for direct messages.

Messages are kept in memory in the order they were sent.  Delivery
only needs the recipient to be known to the ``UserService``; sending to
an unknown id is a silent no‑op that returns ``None``.
"""

import logging
from typing import List, Optional

from ..schemas.message import Message
from ..schemas.user import User
from .user_service import UserService

logger = logging.getLogger(__name__)


class MessageService:
    """Service for sending and listing messages between users."""

    def __init__(self, users: UserService) -> None:
        self._users = users
        self._messages: List[Message] = []

    def send_message(self, sender: User, recipient_id: int, content: str) -> Optional[Message]:
        """Send ``content`` from ``sender`` to the user with ``recipient_id``.

        Returns the stored message, or ``None`` if the recipient does not
        exist.  In that case nothing is stored.  The sender is not
        looked up and may be any ``User``.
        """
        recipient = self._users.get_user_by_id(recipient_id)
        if recipient is None:
            logger.warning(
                "Message from user %s dropped: recipient %s not found",
                sender.id,
                recipient_id,
            )
            return None
        message = Message(sender=sender, recipient=recipient, content=content)
        self._messages.append(message)
        logger.debug("Delivered message from user %s to user %s", sender.id, recipient.id)
        return message

    def get_messages(self, user_id: int) -> List[Message]:
        """Return messages sent or received by ``user_id``, oldest first."""
        return [
            m for m in self._messages
            if m.recipient.id == user_id or m.sender.id == user_id
        ]

    def count(self) -> int:
        """Return the number of stored messages."""
        return len(self._messages)
