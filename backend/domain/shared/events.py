"""Base domain event.

Shared by the user and follow domains. Events are immutable records of
facts that already happened.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events.

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: When the event occurred (UTC timezone-aware).

    Raises:
        ValueError: If occurred_at is not timezone-aware.
    """

    event_id: UUID
    occurred_at: datetime

    def __post_init__(self) -> None:
        """Validate event invariants."""
        if self.occurred_at.tzinfo is None:
            raise ValueError("occurred_at must be timezone-aware (use UTC)")
