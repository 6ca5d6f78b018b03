"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.user_repository import (
    InMemoryUserRepository,
)
from infrastructure.persistence.in_memory.follow_repository import (
    InMemoryFollowRepository,
)
from infrastructure.persistence.in_memory.notification_repository import (
    InMemoryNotificationRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryFollowRepository",
    "InMemoryNotificationRepository",
]
