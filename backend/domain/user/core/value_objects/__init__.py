"""User value objects."""

from domain.user.core.value_objects.user_id import UserId
from domain.user.core.value_objects.external_subject import ExternalSubject

__all__ = ["UserId", "ExternalSubject"]
