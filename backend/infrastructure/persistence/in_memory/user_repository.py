"""In-memory User Repository for testing."""

from copy import deepcopy
from typing import Any, Dict, Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.external_subject import ExternalSubject
from domain.user.core.ports.user_repository import (
    IUserRepository,
    validate_patch,
    validate_counter,
)
from domain.user.core.exceptions.user_errors import UserAlreadyExistsError, UserNotFoundError


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores users by user_id with a secondary index on the external subject.
    Entities are deep-copied in and out so callers cannot mutate stored
    state without going through ``patch`` / ``increment_counter``.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = User.create(ExternalSubject("user_123"), "jane", ...)
        >>> await repo.add(user)
        >>> found = await repo.find_by_external_subject(ExternalSubject("user_123"))
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self._by_subject: Dict[str, str] = {}

    async def add(self, user: User) -> None:
        if str(user.external_subject) in self._by_subject:
            raise UserAlreadyExistsError(str(user.external_subject))
        stored = deepcopy(user)
        stored.collect_events()
        self._users[str(user.user_id)] = stored
        self._by_subject[str(user.external_subject)] = str(user.user_id)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._users.get(str(user_id))
        return deepcopy(user) if user else None

    async def find_by_external_subject(self, external_subject: ExternalSubject) -> Optional[User]:
        user_id = self._by_subject.get(str(external_subject))
        if user_id is None:
            return None
        return deepcopy(self._users[user_id])

    async def patch(self, user_id: UserId, fields: Dict[str, Any]) -> None:
        validate_patch(fields)
        stored = self._get_stored(user_id)
        for name, value in fields.items():
            setattr(stored, name, value)

    async def increment_counter(self, user_id: UserId, counter: str, delta: int) -> None:
        validate_counter(counter)
        stored = self._get_stored(user_id)
        setattr(stored, counter, getattr(stored, counter) + delta)

    def _get_stored(self, user_id: UserId) -> User:
        stored = self._users.get(str(user_id))
        if stored is None:
            raise UserNotFoundError(str(user_id))
        return stored

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()
        self._by_subject.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
