"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any

from domain.user.core.entities.user import User, COUNTER_FIELDS as USER_COUNTER_FIELDS
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.external_subject import ExternalSubject


# Fields a patch may touch. Identity, username, email and image are
# write-once at provisioning.
PATCHABLE_FIELDS = frozenset({"full_name", "bio", "updated_at"})
COUNTER_FIELDS = frozenset(USER_COUNTER_FIELDS)


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Mirrors the datastore primitives the directory relies on: insert,
    unique-index point lookup, partial patch and counter increment.
    """

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a new user document.

        Args:
            user: Freshly provisioned User entity

        Raises:
            UserAlreadyExistsError: If the subject is already provisioned
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by internal ID.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_subject(self, external_subject: ExternalSubject) -> Optional[User]:
        """Find user by identity provider subject.

        This is the primary lookup (subject is unique).

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def patch(self, user_id: UserId, fields: Dict[str, Any]) -> None:
        """Partially update a user document.

        Args:
            user_id: Target user
            fields: Field name to new value, keys limited to PATCHABLE_FIELDS

        Raises:
            ValueError: If a key outside PATCHABLE_FIELDS is supplied
            UserNotFoundError: If no user has this id
        """
        pass

    @abstractmethod
    async def increment_counter(self, user_id: UserId, counter: str, delta: int) -> None:
        """Apply a signed delta to one of the denormalized counters.

        Args:
            user_id: Target user
            counter: One of COUNTER_FIELDS
            delta: Signed amount (+1 / -1 for follow maintenance)

        Raises:
            ValueError: If counter is not in COUNTER_FIELDS
            UserNotFoundError: If no user has this id
        """
        pass


def validate_patch(fields: Dict[str, Any]) -> None:
    """Reject patches that touch write-once or counter fields."""
    unknown = set(fields) - PATCHABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields not patchable: {sorted(unknown)}")


def validate_counter(counter: str) -> None:
    if counter not in COUNTER_FIELDS:
        raise ValueError(f"Unknown counter: {counter}")
