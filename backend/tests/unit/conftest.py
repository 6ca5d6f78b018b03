"""Unit test fixtures.

Unit tests run against in-memory repositories and never import app.py.
"""

from typing import Callable

import pytest

from domain.user.auth.caller_identity import CallerIdentity
from domain.user.core.entities.user import User
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.persistence.in_memory import (
    InMemoryUserRepository,
    InMemoryFollowRepository,
    InMemoryNotificationRepository,
)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def follow_repository() -> InMemoryFollowRepository:
    return InMemoryFollowRepository()


@pytest.fixture
def notification_repository() -> InMemoryNotificationRepository:
    return InMemoryNotificationRepository()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def identity_for() -> Callable[[User], CallerIdentity]:
    """Verified caller identity owning a given user record."""

    def _identity(user: User) -> CallerIdentity:
        return CallerIdentity.from_claims({"sub": str(user.external_subject)})

    return _identity
