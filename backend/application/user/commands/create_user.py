"""Create user command."""

from dataclasses import dataclass
from typing import Optional
import logging

from application.shared.events import publish_all
from domain.shared.ports.event_bus import IEventBus
from domain.user.core.entities.user import User
from domain.user.core.value_objects.external_subject import ExternalSubject
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError


logger = logging.getLogger(__name__)


@dataclass
class CreateUserCommand:
    """Command to provision the local user record after sign-in.

    Idempotent by external subject: when a record already exists the call
    returns without touching it, so later profile changes coming from the
    identity provider are ignored. No caller identity is required.

    Examples:
        >>> command = CreateUserCommand(repository)
        >>> created = await command.execute(
        ...     username="jane",
        ...     full_name="Jane Doe",
        ...     image="https://img.example.com/jane.png",
        ...     email="jane@example.com",
        ...     external_subject=ExternalSubject("user_123"),
        ... )
    """

    repository: IUserRepository
    event_bus: Optional[IEventBus] = None

    async def execute(
        self,
        username: str,
        full_name: str,
        image: str,
        email: str,
        external_subject: ExternalSubject,
        bio: Optional[str] = None,
    ) -> Optional[User]:
        """Execute create user command.

        Returns:
            The new User, or None when the subject was already provisioned
        """
        existing = await self.repository.find_by_external_subject(external_subject)
        if existing is not None:
            logger.debug(
                "User already provisioned",
                extra={"external_subject": str(external_subject)},
            )
            return None

        user = User.create(
            external_subject=external_subject,
            username=username,
            full_name=full_name,
            email=email,
            image=image,
            bio=bio,
        )

        try:
            await self.repository.add(user)
        except UserAlreadyExistsError:
            logger.info(
                "Concurrent provisioning for subject, keeping existing record",
                extra={"external_subject": str(external_subject)},
            )
            return None

        await publish_all(self.event_bus, user.collect_events())

        return user
