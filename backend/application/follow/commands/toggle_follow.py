"""Toggle follow command."""

from dataclasses import dataclass
from typing import Optional
import logging

from application.follow.follow_counts import adjust_follow_counts
from application.shared.events import publish_all
from application.user.current_user import resolve_current_user
from domain.follow.core.entities.follow import Follow
from domain.follow.core.events.follow_events import UserFollowed, UserUnfollowed
from domain.follow.core.ports.follow_repository import IFollowRepository
from domain.notification.core.entities.notification import Notification
from domain.notification.core.ports.notification_repository import INotificationRepository
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.caller_identity import CallerIdentity
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


logger = logging.getLogger(__name__)


@dataclass
class ToggleFollowCommand:
    """Follow or unfollow a user, depending on the current edge state.

    - edge present: delete it, decrement both counters, no notification
    - edge absent: insert it, increment both counters, append one
      "follow" notification for the followed user

    The state read and the writes are separate datastore calls, so two
    concurrent toggles on the same pair can interleave. Following yourself
    is allowed.

    Examples:
        >>> command = ToggleFollowCommand(users, follows, notifications)
        >>> now_following = await command.execute(identity, target_id)
    """

    user_repository: IUserRepository
    follow_repository: IFollowRepository
    notification_repository: INotificationRepository
    event_bus: Optional[IEventBus] = None

    async def execute(self, identity: CallerIdentity, following_id: UserId) -> bool:
        """Execute toggle.

        Args:
            identity: Verified caller identity
            following_id: User to follow/unfollow

        Returns:
            True if the caller follows ``following_id`` after the call

        Raises:
            UnauthorizedError: No verified identity
            UserNotFoundError: Caller not provisioned
        """
        current_user = await resolve_current_user(identity, self.user_repository)
        follower_id = current_user.user_id

        existing = await self.follow_repository.find(follower_id, following_id)

        if existing is not None:
            await self.follow_repository.delete(existing)
            await adjust_follow_counts(self.user_repository, follower_id, following_id, -1)

            logger.debug(
                "Follow edge removed",
                extra={"follower_id": str(follower_id), "following_id": str(following_id)},
            )
            await publish_all(self.event_bus, [UserUnfollowed.create(follower_id, following_id)])
            return False

        await self.follow_repository.add(Follow.create(follower_id, following_id))
        await adjust_follow_counts(self.user_repository, follower_id, following_id, 1)
        await self.notification_repository.add(
            Notification.follow(receiver_id=following_id, sender_id=follower_id)
        )

        logger.debug(
            "Follow edge created",
            extra={"follower_id": str(follower_id), "following_id": str(following_id)},
        )
        await publish_all(self.event_bus, [UserFollowed.create(follower_id, following_id)])
        return True
