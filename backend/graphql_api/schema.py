"""GraphQL schema for the user directory.

Operations are grouped by domain namespace:

    query    { user { ... } follow { ... } }
    mutation { user { ... } follow { ... } }

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry

from graphql_api.resolvers.user import UserQueries, UserMutations
from graphql_api.resolvers.follow import FollowQueries, FollowMutations


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="User directory queries")  # type: ignore[misc]
    def user(self) -> UserQueries:
        """
        Example:
            query {
              user {
                getUserByClerkId(clerkId: "user_2abc") { id }
              }
            }
        """
        return UserQueries()

    @strawberry.field(description="Follow graph queries")  # type: ignore[misc]
    def follow(self) -> FollowQueries:
        return FollowQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="User provisioning and profile mutations")  # type: ignore[misc]
    def user(self) -> UserMutations:
        return UserMutations()

    @strawberry.field(description="Follow graph mutations")  # type: ignore[misc]
    def follow(self) -> FollowMutations:
        return FollowMutations()


def create_schema() -> strawberry.Schema:
    """Create the Strawberry schema with all domain resolvers."""
    return strawberry.Schema(query=Query, mutation=Mutation)
