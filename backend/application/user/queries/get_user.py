"""Get user query."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.entities.user import User
from domain.user.core.value_objects.external_subject import ExternalSubject
from domain.user.core.value_objects.user_id import UserId
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UserNotFoundError


@dataclass
class GetUserQuery:
    """Read-only user lookups.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> user = await query.by_external_subject(ExternalSubject("user_123"))
        >>> profile = await query.profile(UserId("uuid-here"))
    """

    repository: IUserRepository

    async def by_external_subject(self, external_subject: ExternalSubject) -> Optional[User]:
        """Get user by identity provider subject.

        Returns:
            User entity or None if not found. Absence is not an error: the
            client uses it to decide whether onboarding is complete.
        """
        return await self.repository.find_by_external_subject(external_subject)

    async def profile(self, user_id: UserId) -> User:
        """Get user profile by internal id.

        Raises:
            UserNotFoundError: If the id does not resolve
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user
