"""Follow event handlers."""

from dataclasses import dataclass
import logging

from domain.follow.core.events.follow_events import UserFollowed, UserUnfollowed


logger = logging.getLogger(__name__)


@dataclass
class FollowEventsHandler:
    """Audit log for follow graph changes."""

    async def on_followed(self, event: UserFollowed) -> None:
        logger.info(
            "User followed",
            extra={
                "follower_id": str(event.follower_id),
                "following_id": str(event.following_id),
                "self_follow": event.follower_id == event.following_id,
            },
        )

    async def on_unfollowed(self, event: UserUnfollowed) -> None:
        logger.info(
            "User unfollowed",
            extra={
                "follower_id": str(event.follower_id),
                "following_id": str(event.following_id),
            },
        )
