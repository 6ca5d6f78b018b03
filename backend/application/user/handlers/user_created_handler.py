"""User created event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_created import UserCreated


logger = logging.getLogger(__name__)


@dataclass
class UserCreatedHandler:
    """Handler for UserCreated domain event.

    Triggered once per subject when the local record is provisioned.
    """

    async def handle(self, event: UserCreated) -> None:
        logger.info(
            "User created",
            extra={
                "user_id": str(event.user_id),
                "external_subject": str(event.external_subject),
                "username": event.username,
                "created_at": event.occurred_at.isoformat(),
            },
        )
