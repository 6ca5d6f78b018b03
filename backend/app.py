from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Final, Any, AsyncIterator

# Third-party
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Local application imports
from graphql_api.context import create_context, GraphQLContext
from graphql_api.schema import create_schema
from infrastructure.config import get_auth_issuer, get_repository_backend
from infrastructure.persistence.factory import (
    get_user_repository,
    get_follow_repository,
    get_notification_repository,
)
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.user.auth_middleware import AuthMiddleware
from infrastructure.user.jwt_identity_provider import JWTIdentityProvider
from application.handlers import register_event_handlers

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Versione letta da env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")

logger = _logging.getLogger("startup")

schema = create_schema()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "lifespan.start",
        extra={
            "version": APP_VERSION,
            "repository_backend": get_repository_backend(),
            "auth_enabled": _auth_issuer is not None,
        },
    )
    yield
    logger.info("lifespan.shutdown", extra={"status": "cleanup"})


app = FastAPI(
    title="User Directory Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# Singleton dependencies shared across requests
_user_repository = get_user_repository()
_follow_repository = get_follow_repository()
_notification_repository = get_notification_repository()
_event_bus = InMemoryEventBus()
register_event_handlers(_event_bus)

_auth_issuer = get_auth_issuer()
if _auth_issuer:
    app.add_middleware(AuthMiddleware, identity_provider=JWTIdentityProvider(issuer=_auth_issuer))
else:
    logger.warning(
        "AUTH_ISSUER not set: bearer tokens are not verified, "
        "authenticated operations will be rejected"
    )


async def get_graphql_context(request: Request) -> GraphQLContext:
    """Build the per-request GraphQL context.

    Repositories and event bus are process singletons; the caller identity
    comes from the claims the auth middleware put on ``request.state``.
    """
    return create_context(
        user_repository=_user_repository,
        follow_repository=_follow_repository,
        notification_repository=_notification_repository,
        event_bus=_event_bus,
        request=request,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
