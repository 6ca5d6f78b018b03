"""UserProfileUpdated domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from domain.shared.events import DomainEvent
from domain.user.core.value_objects.user_id import UserId


@dataclass(frozen=True)
class UserProfileUpdated(DomainEvent):
    """Domain event: user changed their editable profile fields.

    Contains both old and new values for audit.

    Attributes:
        user_id: Internal user identifier
        old_full_name: Full name before the update
        new_full_name: Full name after the update
        old_bio: Bio before the update (None when unset)
        new_bio: Bio after the update (None when cleared)
    """

    user_id: UserId
    old_full_name: str
    new_full_name: str
    old_bio: Optional[str]
    new_bio: Optional[str]

    @classmethod
    def create(
        cls,
        user_id: UserId,
        old_full_name: str,
        new_full_name: str,
        old_bio: Optional[str],
        new_bio: Optional[str],
        occurred_at: Optional[datetime] = None,
    ) -> "UserProfileUpdated":
        return cls(
            event_id=uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            user_id=user_id,
            old_full_name=old_full_name,
            new_full_name=new_full_name,
            old_bio=old_bio,
            new_bio=new_bio,
        )
