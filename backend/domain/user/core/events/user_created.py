"""UserCreated domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from domain.shared.events import DomainEvent
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.external_subject import ExternalSubject


@dataclass(frozen=True)
class UserCreated(DomainEvent):
    """Domain event: a user record was provisioned.

    Emitted once per external subject, on the first successful
    provisioning call.

    Attributes:
        user_id: Internal user identifier
        external_subject: Identity provider subject
        username: Username chosen at sign-up

    Examples:
        >>> event = UserCreated.create(
        ...     user_id=UserId.generate(),
        ...     external_subject=ExternalSubject("user_123"),
        ...     username="jane",
        ... )
        >>> event.username
        'jane'
    """

    user_id: UserId
    external_subject: ExternalSubject
    username: str

    @classmethod
    def create(
        cls,
        user_id: UserId,
        external_subject: ExternalSubject,
        username: str,
        occurred_at: Optional[datetime] = None,
    ) -> "UserCreated":
        return cls(
            event_id=uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            user_id=user_id,
            external_subject=external_subject,
            username=username,
        )
