"""Fixtures for GraphQL resolver tests."""

from typing import Any, Callable, Optional
from unittest.mock import MagicMock

import pytest

from graphql_api.context import create_context


class MockInfo:
    """Mock GraphQL Info object carrying a real GraphQLContext."""

    def __init__(self, context: Any):
        self.context = context


@pytest.fixture
def make_info(
    user_repository, follow_repository, notification_repository, event_bus
) -> Callable[..., MockInfo]:
    """Build an Info whose request carries claims for ``subject``."""

    def _make(subject: Optional[str] = None) -> MockInfo:
        request = MagicMock()
        request.state.auth_claims = {"sub": subject} if subject else None
        context = create_context(
            user_repository=user_repository,
            follow_repository=follow_repository,
            notification_repository=notification_repository,
            event_bus=event_bus,
            request=request,
        )
        return MockInfo(context)

    return _make
