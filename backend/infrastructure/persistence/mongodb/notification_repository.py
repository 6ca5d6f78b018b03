"""MongoDB Notification Repository implementation."""

from typing import Any, Dict, List

from domain.notification.core.entities.notification import (
    Notification,
    NotificationType,
)
from domain.notification.core.ports.notification_repository import (
    INotificationRepository,
)
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoNotificationRepository(MongoBaseRepository[Notification], INotificationRepository):
    """Append-only ``notifications`` collection."""

    @property
    def collection_name(self) -> str:
        return "notifications"

    def to_document(self, entity: Notification) -> Dict[str, Any]:
        return {
            "_id": entity.notification_id,
            "receiver_id": str(entity.receiver_id),
            "sender_id": str(entity.sender_id),
            "type": entity.type.value,
            "created_at": entity.created_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> Notification:
        return Notification(
            notification_id=doc["_id"],
            receiver_id=UserId(doc["receiver_id"]),
            sender_id=UserId(doc["sender_id"]),
            type=NotificationType(doc["type"]),
            created_at=self.as_utc(doc["created_at"]),
        )

    async def add(self, notification: Notification) -> None:
        await self._insert_one(self.to_document(notification))

    async def find_by_receiver(self, receiver_id: UserId, limit: int = 50) -> List[Notification]:
        docs = await self._find_many(
            {"receiver_id": str(receiver_id)},
            sort=[("created_at", -1)],
            limit=limit,
        )
        return [self.from_document(doc) for doc in docs]
