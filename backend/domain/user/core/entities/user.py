"""User entity - aggregate root."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List, Any

from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.external_subject import ExternalSubject


COUNTER_FIELDS = ("follower_count", "following_count", "post_count")


@dataclass
class User:
    """User aggregate root.

    Local record for a principal authenticated by the identity provider.
    Looked up either by ``user_id`` (internal) or ``external_subject``
    (the provider's ``sub`` claim).

    Invariants:
    - external_subject is unique and immutable
    - counters are never negative on creation
    - username, email and image are set at provisioning and not edited here
    - last profile update cannot be before creation

    The follower/following counters are denormalized from the follow graph
    and are maintained by the follow commands, not by this entity.

    Examples:
        >>> user = User.create(
        ...     external_subject=ExternalSubject("user_123"),
        ...     username="jane",
        ...     full_name="Jane Doe",
        ...     email="jane@example.com",
        ...     image="https://img.example.com/jane.png",
        ... )
        >>> user.follower_count
        0
        >>> user.update_profile("Jane D.", bio="hello")
        >>> user.bio
        'hello'
    """

    user_id: UserId
    external_subject: ExternalSubject
    username: str
    full_name: str
    email: str
    image: str
    created_at: datetime
    updated_at: datetime
    bio: Optional[str] = None
    follower_count: int = 0
    following_count: int = 0
    post_count: int = 0
    _events: List[Any] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in COUNTER_FIELDS:
            if not isinstance(getattr(self, name), int):
                raise TypeError(f"{name} must be an integer")

        if self.updated_at < self.created_at:
            raise ValueError(
                f"updated_at cannot be before created_at: {self.updated_at} < {self.created_at}"
            )

    @staticmethod
    def create(
        external_subject: ExternalSubject,
        username: str,
        full_name: str,
        email: str,
        image: str,
        bio: Optional[str] = None,
    ) -> "User":
        """Factory method to provision a new user.

        All counters start at zero.

        Returns:
            New User instance with a pending UserCreated event
        """
        from domain.user.core.events.user_created import UserCreated

        now = datetime.now(timezone.utc)
        user_id = UserId.generate()

        user = User(
            user_id=user_id,
            external_subject=external_subject,
            username=username,
            full_name=full_name,
            email=email,
            image=image,
            bio=bio,
            created_at=now,
            updated_at=now,
        )

        user._add_event(
            UserCreated.create(
                user_id=user_id,
                external_subject=external_subject,
                username=username,
                occurred_at=now,
            )
        )

        return user

    def update_profile(self, full_name: str, bio: Optional[str] = None) -> None:
        """Replace the editable profile fields.

        ``bio`` is overwritten even when None, so omitting it clears the
        stored value.

        Examples:
            >>> user.update_profile("Jane Doe")
            >>> user.bio is None
            True
        """
        from domain.user.core.events.user_updated import UserProfileUpdated

        old_full_name, old_bio = self.full_name, self.bio
        self.full_name = full_name
        self.bio = bio
        self.updated_at = max(datetime.now(timezone.utc), self.created_at)

        self._add_event(
            UserProfileUpdated.create(
                user_id=self.user_id,
                old_full_name=old_full_name,
                new_full_name=full_name,
                old_bio=old_bio,
                new_bio=bio,
                occurred_at=self.updated_at,
            )
        )

    def _add_event(self, event: Any) -> None:
        self._events.append(event)

    def collect_events(self) -> List[Any]:
        """Collect and clear domain events.

        Examples:
            >>> events = user.collect_events()
            >>> user.collect_events()  # Events cleared after collection
            []
        """
        events = self._events.copy()
        self._events.clear()
        return events

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)
