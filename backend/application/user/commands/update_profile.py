"""Update profile command."""

from dataclasses import dataclass
from typing import Optional

from application.shared.events import publish_all
from application.user.current_user import resolve_current_user
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.caller_identity import CallerIdentity
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class UpdateProfileCommand:
    """Command to update the caller's own full name and bio.

    The target record is always the one resolved from the caller identity;
    no user id is accepted as input. Username, email, image and counters
    are never touched.

    Examples:
        >>> command = UpdateProfileCommand(repository)
        >>> user = await command.execute(identity, full_name="Jane D.", bio=None)
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def execute(
        self,
        identity: CallerIdentity,
        full_name: str,
        bio: Optional[str] = None,
    ) -> User:
        """Execute update profile command.

        Args:
            identity: Verified caller identity
            full_name: New full name
            bio: New bio; None clears the stored value

        Returns:
            Updated user entity

        Raises:
            UnauthorizedError: No verified identity
            UserNotFoundError: Caller not provisioned
        """
        user = await resolve_current_user(identity, self.repository)

        user.update_profile(full_name, bio)

        await self.repository.patch(
            user.user_id,
            {"full_name": user.full_name, "bio": user.bio, "updated_at": user.updated_at},
        )
        await publish_all(self.event_bus, user.collect_events())

        return user
