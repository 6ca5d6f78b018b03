"""GraphQL types for User domain."""

from typing import Optional
from datetime import datetime
import strawberry

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.exceptions.user_errors import UserNotFoundError


@strawberry.type
class UserType:
    """User GraphQL type.

    Field names follow the client contract (``clerkId``, ``fullname``,
    ``followers``...). Resolvers receive the domain ``User`` as root.

    Examples:
        query {
          user {
            getUserProfile(id: "...") {
              id
              username
              fullname
              followers
              following
            }
          }
        }
    """

    @strawberry.field
    def id(self, root: User) -> strawberry.ID:
        """Internal user UUID."""
        return strawberry.ID(str(root.user_id))

    @strawberry.field(name="clerkId")
    def clerk_id(self, root: User) -> str:
        """Identity provider subject."""
        return str(root.external_subject)

    @strawberry.field
    def username(self, root: User) -> str:
        return root.username

    @strawberry.field
    def fullname(self, root: User) -> str:
        return root.full_name

    @strawberry.field
    def email(self, root: User) -> str:
        return root.email

    @strawberry.field
    def image(self, root: User) -> str:
        return root.image

    @strawberry.field
    def bio(self, root: User) -> Optional[str]:
        return root.bio

    @strawberry.field
    def followers(self, root: User) -> int:
        """Number of users following this user."""
        return root.follower_count

    @strawberry.field
    def following(self, root: User) -> int:
        """Number of users this user follows."""
        return root.following_count

    @strawberry.field
    def posts(self, root: User) -> int:
        return root.post_count

    @strawberry.field
    def created_at(self, root: User) -> datetime:
        return root.created_at

    @strawberry.field
    def updated_at(self, root: User) -> datetime:
        return root.updated_at


def parse_user_id(value: str) -> UserId:
    """Parse a client-supplied user id.

    A malformed id can never resolve to a record, so it is reported the
    same way as an unknown one.

    Raises:
        UserNotFoundError: If value is not a valid user id
    """
    try:
        return UserId(value)
    except ValueError:
        raise UserNotFoundError(value) from None
