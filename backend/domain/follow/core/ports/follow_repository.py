"""Follow repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.follow.core.entities.follow import Follow
from domain.user.core.value_objects.user_id import UserId


class IFollowRepository(ABC):
    """Repository interface for follow edges.

    Lookups go through the composite (follower_id, following_id) key.
    """

    @abstractmethod
    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        """Find the edge follower -> following.

        Returns:
            Follow edge if present, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, follow: Follow) -> None:
        """Insert a new edge."""
        pass

    @abstractmethod
    async def delete(self, follow: Follow) -> bool:
        """Delete an edge.

        Returns:
            True if the edge was deleted, False if it was already gone
        """
        pass
