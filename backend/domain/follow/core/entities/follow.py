"""Follow entity."""

from dataclasses import dataclass
from datetime import datetime, timezone
import uuid

from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class Follow:
    """Directed follow edge.

    Edges are created and deleted, never modified, hence frozen.

    Examples:
        >>> a, b = UserId.generate(), UserId.generate()
        >>> edge = Follow.create(follower_id=a, following_id=b)
        >>> edge.follower_id == a
        True
    """

    follow_id: str
    follower_id: UserId
    following_id: UserId
    created_at: datetime

    @staticmethod
    def create(follower_id: UserId, following_id: UserId) -> "Follow":
        return Follow(
            follow_id=str(uuid.uuid4()),
            follower_id=follower_id,
            following_id=following_id,
            created_at=datetime.now(timezone.utc),
        )
