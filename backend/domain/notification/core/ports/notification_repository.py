"""Notification repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List

from domain.notification.core.entities.notification import Notification
from domain.user.core.value_objects.user_id import UserId


class INotificationRepository(ABC):
    """Repository interface for notifications (append-only)."""

    @abstractmethod
    async def add(self, notification: Notification) -> None:
        """Append a notification."""
        pass

    @abstractmethod
    async def find_by_receiver(self, receiver_id: UserId, limit: int = 50) -> List[Notification]:
        """List notifications addressed to a user, newest first."""
        pass
