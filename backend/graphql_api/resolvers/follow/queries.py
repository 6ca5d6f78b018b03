"""Follow domain GraphQL queries."""

import strawberry
from strawberry.types import Info

from graphql_api.types_user import parse_user_id
from application.follow.queries.is_following import IsFollowingQuery


@strawberry.type
class FollowQueries:
    """Follow graph queries.

    Examples:
        query {
          follow {
            isFollowing(followingId: "uuid")
          }
        }
    """

    @strawberry.field
    async def is_following(self, info: Info, following_id: strawberry.ID) -> bool:
        """Whether the caller follows ``followingId``.

        Raises:
            UnauthorizedError: No verified identity on the request
            UserNotFoundError: Caller not provisioned
        """
        query = IsFollowingQuery(
            user_repository=info.context.get("user_repository"),
            follow_repository=info.context.get("follow_repository"),
        )
        return await query.execute(
            info.context.get("caller_identity"),
            parse_user_id(str(following_id)),
        )
