"""Notification entity."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
import uuid

from domain.user.core.value_objects.user_id import UserId


class NotificationType(str, Enum):
    """Kinds of notification this service emits."""

    FOLLOW = "follow"


@dataclass(frozen=True)
class Notification:
    """Notification sent from one user to another.

    Immutable once written: no read/unread state, no deletion.
    """

    notification_id: str
    receiver_id: UserId
    sender_id: UserId
    type: NotificationType
    created_at: datetime

    @staticmethod
    def follow(receiver_id: UserId, sender_id: UserId) -> "Notification":
        """Notification for "sender started following receiver"."""
        return Notification(
            notification_id=str(uuid.uuid4()),
            receiver_id=receiver_id,
            sender_id=sender_id,
            type=NotificationType.FOLLOW,
            created_at=datetime.now(timezone.utc),
        )
