"""Follow GraphQL resolvers."""

from graphql_api.resolvers.follow.queries import FollowQueries
from graphql_api.resolvers.follow.mutations import FollowMutations

__all__ = ["FollowQueries", "FollowMutations"]
