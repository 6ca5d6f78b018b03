"""User profile updated event handler."""

from dataclasses import dataclass
import logging

from domain.user.core.events.user_updated import UserProfileUpdated


logger = logging.getLogger(__name__)


@dataclass
class UserProfileUpdatedHandler:
    """Handler for UserProfileUpdated domain event."""

    async def handle(self, event: UserProfileUpdated) -> None:
        logger.info(
            "User profile updated",
            extra={
                "user_id": str(event.user_id),
                "full_name_changed": event.old_full_name != event.new_full_name,
                "bio_changed": event.old_bio != event.new_bio,
                "updated_at": event.occurred_at.isoformat(),
            },
        )
