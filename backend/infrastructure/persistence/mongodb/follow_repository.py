"""MongoDB Follow Repository implementation."""

from typing import Optional, Any, Dict

from domain.follow.core.entities.follow import Follow
from domain.follow.core.ports.follow_repository import IFollowRepository
from domain.user.core.value_objects.user_id import UserId
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoFollowRepository(MongoBaseRepository[Follow], IFollowRepository):
    """MongoDB implementation of the follow graph.

    Collection ``follows`` carries a unique compound index on
    (follower_id, following_id); a duplicate insert raises
    DuplicateKeyError, which propagates to the caller.
    """

    @property
    def collection_name(self) -> str:
        return "follows"

    def to_document(self, entity: Follow) -> Dict[str, Any]:
        return {
            "_id": entity.follow_id,
            "follower_id": str(entity.follower_id),
            "following_id": str(entity.following_id),
            "created_at": entity.created_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> Follow:
        return Follow(
            follow_id=doc["_id"],
            follower_id=UserId(doc["follower_id"]),
            following_id=UserId(doc["following_id"]),
            created_at=self.as_utc(doc["created_at"]),
        )

    async def find(self, follower_id: UserId, following_id: UserId) -> Optional[Follow]:
        doc = await self._find_one(
            {"follower_id": str(follower_id), "following_id": str(following_id)}
        )
        return self.from_document(doc) if doc else None

    async def add(self, follow: Follow) -> None:
        await self._insert_one(self.to_document(follow))

    async def delete(self, follow: Follow) -> bool:
        deleted = await self._delete_one({"_id": follow.follow_id})
        return deleted > 0
