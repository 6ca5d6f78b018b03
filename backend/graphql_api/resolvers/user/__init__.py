"""User GraphQL resolvers."""

from graphql_api.resolvers.user.queries import UserQueries
from graphql_api.resolvers.user.mutations import UserMutations

__all__ = ["UserQueries", "UserMutations"]
