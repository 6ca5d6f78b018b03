"""User domain GraphQL queries."""

from typing import Optional, cast
import strawberry
from strawberry.types import Info

from graphql_api.types_user import UserType, parse_user_id
from application.user.queries.get_user import GetUserQuery
from domain.user.core.value_objects.external_subject import ExternalSubject


@strawberry.type
class UserQueries:
    """User domain queries.

    Public read access to user records; no authentication required.

    Examples:
        query {
          user {
            getUserByClerkId(clerkId: "user_2abc") { id username }
            getUserProfile(id: "uuid") { fullname followers following }
          }
        }
    """

    @strawberry.field
    async def get_user_by_clerk_id(self, info: Info, clerk_id: str) -> Optional[UserType]:
        """Look up a user by identity provider subject.

        Returns null when the subject was never provisioned, including
        values that cannot be a subject at all; clients use this to decide
        whether onboarding is complete.
        """
        user_repository = info.context.get("user_repository")
        if not user_repository:
            raise RuntimeError("user_repository not found in context")

        try:
            external_subject = ExternalSubject(clerk_id)
        except ValueError:
            return None

        query = GetUserQuery(repository=user_repository)
        user = await query.by_external_subject(external_subject)

        return cast(Optional[UserType], user)

    @strawberry.field
    async def get_user_profile(self, info: Info, id: strawberry.ID) -> UserType:
        """Get a user's public profile by internal id.

        Raises:
            UserNotFoundError: If the id does not resolve
        """
        user_repository = info.context.get("user_repository")
        if not user_repository:
            raise RuntimeError("user_repository not found in context")

        query = GetUserQuery(repository=user_repository)
        user = await query.profile(parse_user_id(str(id)))

        return cast(UserType, user)
