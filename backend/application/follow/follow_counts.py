"""Maintenance of the denormalized follower/following counters."""

import logging

from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.user_id import UserId


logger = logging.getLogger(__name__)


async def adjust_follow_counts(
    repository: IUserRepository,
    follower_id: UserId,
    following_id: UserId,
    delta: int,
) -> bool:
    """Apply ``delta`` to both ends of a follow edge.

    ``following_count`` moves on the follower, ``follower_count`` on the
    followed user, through two independent updates. When either record is
    missing the update is skipped with a warning instead of failing; the
    edge itself has already been written by the caller.

    Args:
        repository: User repository
        follower_id: Source of the edge
        following_id: Target of the edge
        delta: +1 after a follow, -1 after an unfollow

    Returns:
        True if counters were updated, False if skipped

    Raises:
        ValueError: If delta is not +1 or -1
    """
    if delta not in (1, -1):
        raise ValueError(f"delta must be +1 or -1, got {delta}")

    follower = await repository.find_by_id(follower_id)
    following = await repository.find_by_id(following_id)

    if follower is None or following is None:
        logger.warning(
            "Skipping follow counter update: user record missing",
            extra={
                "follower_id": str(follower_id),
                "following_id": str(following_id),
                "follower_missing": follower is None,
                "following_missing": following is None,
                "delta": delta,
            },
        )
        return False

    await repository.increment_counter(follower_id, "following_count", delta)
    await repository.increment_counter(following_id, "follower_count", delta)
    return True
