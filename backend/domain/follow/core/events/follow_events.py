"""Follow domain events."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.shared.events import DomainEvent
from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserFollowed(DomainEvent):
    """Domain event: follower started following another user."""

    follower_id: UserId
    following_id: UserId

    @classmethod
    def create(cls, follower_id: UserId, following_id: UserId) -> "UserFollowed":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            follower_id=follower_id,
            following_id=following_id,
        )


@dataclass(frozen=True)
class UserUnfollowed(DomainEvent):
    """Domain event: follower removed an existing follow edge."""

    follower_id: UserId
    following_id: UserId

    @classmethod
    def create(cls, follower_id: UserId, following_id: UserId) -> "UserUnfollowed":
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            follower_id=follower_id,
            following_id=following_id,
        )
