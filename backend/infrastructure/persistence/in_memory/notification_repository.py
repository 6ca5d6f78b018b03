"""In-memory Notification Repository for testing."""

from typing import List

from domain.notification.core.entities.notification import Notification
from domain.notification.core.ports.notification_repository import (
    INotificationRepository,
)
from domain.user.core.value_objects.user_id import UserId


class InMemoryNotificationRepository(INotificationRepository):
    """Append-only list of notifications, in insertion order."""

    def __init__(self) -> None:
        self._notifications: List[Notification] = []

    async def add(self, notification: Notification) -> None:
        self._notifications.append(notification)

    async def find_by_receiver(self, receiver_id: UserId, limit: int = 50) -> List[Notification]:
        matching = [n for n in self._notifications if n.receiver_id == receiver_id]
        matching.reverse()
        return matching[:limit]

    def all(self) -> List[Notification]:
        """Snapshot of every stored notification, oldest first."""
        return list(self._notifications)

    def clear(self) -> None:
        self._notifications.clear()

    def count(self) -> int:
        return len(self._notifications)
