"""MongoDB repository implementations."""

from .base import MongoBaseRepository
from .user_repository import MongoUserRepository
from .follow_repository import MongoFollowRepository
from .notification_repository import MongoNotificationRepository

__all__ = [
    "MongoBaseRepository",
    "MongoUserRepository",
    "MongoFollowRepository",
    "MongoNotificationRepository",
]
