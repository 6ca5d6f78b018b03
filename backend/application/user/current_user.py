"""Resolution of the authenticated caller to a local user record."""

import logging

from domain.user.auth.caller_identity import CallerIdentity
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.exceptions.user_errors import UnauthorizedError, UserNotFoundError


logger = logging.getLogger(__name__)


async def resolve_current_user(identity: CallerIdentity, repository: IUserRepository) -> User:
    """Return the User owning the caller's verified identity.

    This is the single authorization gate: every mutation except
    provisioning, and the follow-state query, go through it.

    Args:
        identity: Verified caller identity for the current request
        repository: User repository

    Returns:
        The caller's User record

    Raises:
        UnauthorizedError: No verified identity on the request
        UserNotFoundError: Identity is verified but the user was never
            provisioned (onboarding not completed)
    """
    if identity.subject is None:
        raise UnauthorizedError()

    user = await repository.find_by_external_subject(identity.subject)
    if user is None:
        logger.info(
            "Verified subject has no user record",
            extra={"external_subject": str(identity.subject)},
        )
        raise UserNotFoundError(str(identity.subject))

    return user
