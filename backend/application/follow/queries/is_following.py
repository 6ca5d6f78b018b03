"""Is-following query."""

from dataclasses import dataclass

from application.user.current_user import resolve_current_user
from domain.follow.core.ports.follow_repository import IFollowRepository
from domain.user.auth.caller_identity import CallerIdentity
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


@dataclass
class IsFollowingQuery:
    """Check whether the caller follows a given user. Read-only."""

    user_repository: IUserRepository
    follow_repository: IFollowRepository

    async def execute(self, identity: CallerIdentity, following_id: UserId) -> bool:
        """
        Raises:
            UnauthorizedError: No verified identity
            UserNotFoundError: Caller not provisioned
        """
        current_user = await resolve_current_user(identity, self.user_repository)
        follow = await self.follow_repository.find(current_user.user_id, following_id)
        return follow is not None
