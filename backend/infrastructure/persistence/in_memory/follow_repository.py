"""In-memory Follow Repository for testing."""

from typing import Dict, Optional, Tuple

from domain.follow.core.entities.follow import Follow
from domain.follow.core.ports.follow_repository import IFollowRepository
from domain.user.core.value_objects.user_id import UserId


class InMemoryFollowRepository(IFollowRepository):
    """Follow edges keyed by (follower_id, following_id).

    The dict key enforces at most one edge per ordered pair.
    """

    def __init__(self) -> None:
        self._edges: Dict[Tuple[str, str], Follow] = {}

    @staticmethod
    def _key(follower_id: UserId, following_id: UserId) -> Tuple[str, str]:
        return str(follower_id), str(following_id)

    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        return self._edges.get(self._key(follower_id, following_id))

    async def add(self, follow: Follow) -> None:
        key = self._key(follow.follower_id, follow.following_id)
        if key in self._edges:
            raise ValueError(f"Follow edge already exists: {key[0]} -> {key[1]}")
        self._edges[key] = follow

    async def delete(self, follow: Follow) -> bool:
        key = self._key(follow.follower_id, follow.following_id)
        return self._edges.pop(key, None) is not None

    def clear(self) -> None:
        self._edges.clear()

    def count(self) -> int:
        return len(self._edges)
