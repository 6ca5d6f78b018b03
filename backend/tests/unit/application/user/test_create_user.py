"""Tests for create user command."""

import pytest
from unittest.mock import AsyncMock

from application.user.commands.create_user import CreateUserCommand
from domain.user.core.events.user_created import UserCreated
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError
from domain.user.core.value_objects.external_subject import ExternalSubject


def _args(**overrides):
    args = dict(
        username="jane",
        full_name="Jane Doe",
        image="https://img.example.com/jane.png",
        email="jane@example.com",
        external_subject=ExternalSubject("user_123"),
    )
    args.update(overrides)
    return args


@pytest.fixture
def command(user_repository):
    return CreateUserCommand(user_repository)


@pytest.mark.asyncio
async def test_creates_user_with_zero_counters(command, user_repository):
    user = await command.execute(**_args(bio="hi"))

    assert user is not None
    stored = await user_repository.find_by_external_subject(ExternalSubject("user_123"))
    assert stored is not None
    assert stored.user_id == user.user_id
    assert stored.username == "jane"
    assert stored.full_name == "Jane Doe"
    assert stored.bio == "hi"
    assert (stored.follower_count, stored.following_count, stored.post_count) == (0, 0, 0)


@pytest.mark.asyncio
async def test_is_idempotent_by_subject(command, user_repository):
    first = await command.execute(**_args())

    second = await command.execute(**_args(username="other", full_name="Other Name"))

    assert second is None
    assert user_repository.count() == 1
    stored = await user_repository.find_by_external_subject(ExternalSubject("user_123"))
    assert stored.user_id == first.user_id
    assert stored.username == "jane"
    assert stored.full_name == "Jane Doe"


@pytest.mark.asyncio
async def test_different_subjects_create_different_users(command, user_repository):
    a = await command.execute(**_args())
    b = await command.execute(**_args(external_subject=ExternalSubject("user_456")))

    assert a.user_id != b.user_id
    assert user_repository.count() == 2


@pytest.mark.asyncio
async def test_publishes_user_created(user_repository):
    event_bus = AsyncMock()
    command = CreateUserCommand(user_repository, event_bus=event_bus)

    user = await command.execute(**_args())

    event_bus.publish.assert_awaited_once()
    event = event_bus.publish.await_args.args[0]
    assert isinstance(event, UserCreated)
    assert event.user_id == user.user_id


@pytest.mark.asyncio
async def test_existing_user_publishes_nothing(user_repository):
    event_bus = AsyncMock()
    command = CreateUserCommand(user_repository, event_bus=event_bus)
    await command.execute(**_args())
    event_bus.reset_mock()

    await command.execute(**_args())

    event_bus.publish.assert_not_awaited()


@pytest.mark.asyncio
async def test_losing_concurrent_insert_returns_none():
    """Both calls miss the lookup; the second insert hits the unique subject."""
    repository = AsyncMock()
    repository.find_by_external_subject.return_value = None
    repository.add.side_effect = UserAlreadyExistsError("user_123")
    event_bus = AsyncMock()
    command = CreateUserCommand(repository, event_bus=event_bus)

    result = await command.execute(**_args())

    assert result is None
    repository.add.assert_awaited_once()
    event_bus.publish.assert_not_awaited()
