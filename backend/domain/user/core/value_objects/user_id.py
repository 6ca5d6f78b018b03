"""UserId value object."""

from dataclasses import dataclass
import uuid


@dataclass(frozen=True)
class UserId:
    """Opaque user identifier.

    Assigned once when the user is provisioned and never changed. Follow
    edges and notifications reference users through this value.

    Examples:
        >>> user_id = UserId("e4b8c9d0-1234-5678-9abc-def012345678")
        >>> user_id.value
        'e4b8c9d0-1234-5678-9abc-def012345678'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate UUID format."""
        try:
            uuid.UUID(self.value)
        except (ValueError, AttributeError, TypeError) as e:
            raise ValueError(f"Invalid user id: {self.value!r}") from e

    @staticmethod
    def generate() -> "UserId":
        """Generate a new random UserId (UUID v4)."""
        return UserId(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"UserId('{self.value}')"
