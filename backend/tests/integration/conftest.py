"""Integration test fixtures.

``client`` talks to the real ``app`` (no AUTH_ISSUER, so every request is
anonymous). ``auth_client`` talks to an app wired with AuthMiddleware and
a fake identity provider that maps ``Bearer <sub>`` to ``{"sub": <sub>}``.
"""

from typing import Any, AsyncIterator, Dict

import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from httpx import AsyncClient, ASGITransport
from strawberry.fastapi import GraphQLRouter

from application.handlers import register_event_handlers
from domain.user.auth.ports.identity_provider import IIdentityProvider, InvalidTokenError
from graphql_api.context import create_context, GraphQLContext
from graphql_api.schema import create_schema
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.persistence.in_memory import (
    InMemoryUserRepository,
    InMemoryFollowRepository,
    InMemoryNotificationRepository,
)
from infrastructure.user.auth_middleware import AuthMiddleware


class SubjectAsTokenProvider(IIdentityProvider):
    """Accepts any token and uses it as the subject; "expired" is rejected."""

    async def verify_token(self, token: str) -> Dict[str, Any]:
        if token == "expired":
            raise InvalidTokenError("token has expired")
        return {"sub": token}


@pytest_asyncio.fixture
async def client(inmemory_backend: None) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the production app (in-memory storage)."""
    from app import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def stores() -> Dict[str, Any]:
    return {
        "user_repository": InMemoryUserRepository(),
        "follow_repository": InMemoryFollowRepository(),
        "notification_repository": InMemoryNotificationRepository(),
    }


@pytest_asyncio.fixture
async def auth_client(stores: Dict[str, Any]) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against an app with bearer authentication enabled."""
    event_bus = InMemoryEventBus()
    register_event_handlers(event_bus)

    async def get_context(request: Request) -> GraphQLContext:
        return create_context(event_bus=event_bus, request=request, **stores)

    test_app = FastAPI()
    test_app.add_middleware(AuthMiddleware, identity_provider=SubjectAsTokenProvider())
    test_app.include_router(
        GraphQLRouter(create_schema(), context_getter=get_context), prefix="/graphql"
    )

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
