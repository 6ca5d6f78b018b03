"""GraphQL context factory for dependency injection.

Provides the dependencies GraphQL resolvers need:
- Repositories (users, follows, notifications)
- Event bus (domain events)
- Caller identity (from the auth middleware claims)
"""

from typing import Any, Optional, Dict
from strawberry.fastapi import BaseContext
from fastapi import Request

from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.caller_identity import CallerIdentity
from domain.user.core.ports.user_repository import IUserRepository
from domain.follow.core.ports.follow_repository import IFollowRepository
from domain.notification.core.ports.notification_repository import (
    INotificationRepository,
)


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Injected into every resolver via the ``info`` parameter. Resolvers
    access dependencies using ``info.context.get("name")``.

    Attributes:
        user_repository: Repository for user records
        follow_repository: Repository for follow edges
        notification_repository: Repository for notifications
        event_bus: Event bus for domain events (optional)
        request: FastAPI request object (carries auth_claims from middleware)
        auth_claims: Verified JWT claims, None if the request is anonymous
        caller_identity: CallerIdentity built from auth_claims
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        follow_repository: IFollowRepository,
        notification_repository: INotificationRepository,
        event_bus: Optional[IEventBus] = None,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.user_repository = user_repository
        self.follow_repository = follow_repository
        self.notification_repository = notification_repository
        self.event_bus = event_bus
        self.request = request
        self.auth_claims: Optional[Dict[str, Any]] = (
            getattr(request.state, "auth_claims", None) if request else None
        )
        self.caller_identity = CallerIdentity.from_claims(self.auth_claims)

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Example:
            >>> repository = info.context.get("user_repository")
        """
        return getattr(self, key, None)


def create_context(
    user_repository: IUserRepository,
    follow_repository: IFollowRepository,
    notification_repository: INotificationRepository,
    event_bus: Optional[IEventBus] = None,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> context = create_context(
        ...     user_repository=InMemoryUserRepository(),
        ...     follow_repository=InMemoryFollowRepository(),
        ...     notification_repository=InMemoryNotificationRepository(),
        ...     event_bus=InMemoryEventBus(),
        ... )
    """
    return GraphQLContext(
        user_repository=user_repository,
        follow_repository=follow_repository,
        notification_repository=notification_repository,
        event_bus=event_bus,
        request=request,
    )
