"""Follow domain GraphQL mutations."""

import strawberry
from strawberry.types import Info

from graphql_api.types_user import parse_user_id
from application.follow.commands.toggle_follow import ToggleFollowCommand


@strawberry.type
class FollowMutations:
    """Follow graph mutations.

    Examples:
        mutation {
          follow {
            toggleFollow(followingId: "uuid")
          }
        }
    """

    @strawberry.mutation
    async def toggle_follow(self, info: Info, following_id: strawberry.ID) -> bool:
        """Follow ``followingId`` if not already following, else unfollow.

        Returns:
            The follow state after the call

        Raises:
            UnauthorizedError: No verified identity on the request
            UserNotFoundError: Caller not provisioned
        """
        command = ToggleFollowCommand(
            user_repository=info.context.get("user_repository"),
            follow_repository=info.context.get("follow_repository"),
            notification_repository=info.context.get("notification_repository"),
            event_bus=info.context.get("event_bus"),
        )
        return await command.execute(
            info.context.get("caller_identity"),
            parse_user_id(str(following_id)),
        )
