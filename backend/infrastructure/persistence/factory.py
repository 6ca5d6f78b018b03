"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
- Default: inmemory (safe fallback if env vars not set)

All MongoDB repositories share a single motor client.

Usage:
    from infrastructure.persistence.factory import (
        create_user_repository,
        get_user_repository,
    )

    repo = create_user_repository()  # Returns inmemory or mongodb based on env
    repo = get_user_repository()     # Singleton instance
"""

import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient

from domain.user.core.ports.user_repository import IUserRepository
from domain.follow.core.ports.follow_repository import IFollowRepository
from domain.notification.core.ports.notification_repository import (
    INotificationRepository,
)
from infrastructure.config import get_repository_backend, get_mongodb_uri
from infrastructure.persistence.in_memory import (
    InMemoryUserRepository,
    InMemoryFollowRepository,
    InMemoryNotificationRepository,
)
from infrastructure.persistence.mongodb import (
    MongoUserRepository,
    MongoFollowRepository,
    MongoNotificationRepository,
)

logger = logging.getLogger(__name__)

_mongo_client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None


def _use_mongodb() -> bool:
    mode = get_repository_backend()
    if mode == "mongodb":
        return True
    if mode != "inmemory":
        logger.warning(f"Unknown REPOSITORY_BACKEND={mode!r}, falling back to inmemory")
    return False


def _get_mongo_client() -> AsyncIOMotorClient[Dict[str, Any]]:
    """Lazily create the shared motor client.

    Raises:
        ValueError: If MONGODB_URI is not set
    """
    global _mongo_client
    if _mongo_client is None:
        uri = get_mongodb_uri()
        if not uri:
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )
        _mongo_client = AsyncIOMotorClient(uri)
    return _mongo_client


def create_user_repository() -> IUserRepository:
    """Create user repository based on REPOSITORY_BACKEND env var.

    Environment variable: REPOSITORY_BACKEND
    Values:
        - "inmemory": In-memory repository (default, fast, transient)
        - "mongodb": MongoDB repository (persistent, requires MONGODB_URI)

    Raises:
        ValueError: If mongodb selected but MONGODB_URI not set
    """
    if _use_mongodb():
        return MongoUserRepository(client=_get_mongo_client())
    return InMemoryUserRepository()


def create_follow_repository() -> IFollowRepository:
    if _use_mongodb():
        return MongoFollowRepository(client=_get_mongo_client())
    return InMemoryFollowRepository()


def create_notification_repository() -> INotificationRepository:
    if _use_mongodb():
        return MongoNotificationRepository(client=_get_mongo_client())
    return InMemoryNotificationRepository()


# Singleton instances (lazy initialization)
_user_repository: Optional[IUserRepository] = None
_follow_repository: Optional[IFollowRepository] = None
_notification_repository: Optional[INotificationRepository] = None


def get_user_repository() -> IUserRepository:
    """Get singleton user repository instance."""
    global _user_repository
    if _user_repository is None:
        _user_repository = create_user_repository()
    return _user_repository


def get_follow_repository() -> IFollowRepository:
    """Get singleton follow repository instance."""
    global _follow_repository
    if _follow_repository is None:
        _follow_repository = create_follow_repository()
    return _follow_repository


def get_notification_repository() -> INotificationRepository:
    """Get singleton notification repository instance."""
    global _notification_repository
    if _notification_repository is None:
        _notification_repository = create_notification_repository()
    return _notification_repository


def reset_repositories() -> None:
    """Reset singleton repository instances and the shared client.

    Useful for testing to force re-creation with different env vars.

    Example:
        # In tests:
        reset_repositories()
        os.environ["REPOSITORY_BACKEND"] = "inmemory"
        repo = get_user_repository()  # Creates new instance
    """
    global _user_repository, _follow_repository, _notification_repository
    global _mongo_client
    _user_repository = None
    _follow_repository = None
    _notification_repository = None
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
