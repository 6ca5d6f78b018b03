"""Caller identity passed explicitly into every handler."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from domain.user.core.value_objects.external_subject import ExternalSubject


@dataclass(frozen=True)
class CallerIdentity:
    """Verified identity of the caller for a single request.

    Built from the claims the auth middleware attached to the request.
    ``subject`` is None for anonymous calls.

    Examples:
        >>> CallerIdentity.from_claims({"sub": "user_123"}).subject
        ExternalSubject('user_123')
        >>> CallerIdentity.anonymous().is_authenticated
        False
    """

    subject: Optional[ExternalSubject] = None
    claims: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @staticmethod
    def anonymous() -> "CallerIdentity":
        return CallerIdentity()

    @staticmethod
    def from_claims(claims: Optional[Dict[str, Any]]) -> "CallerIdentity":
        """Build identity from verified token claims.

        Missing claims, or a ``sub`` that is missing, blank or not a valid
        subject, yield an anonymous identity.
        """
        if not claims:
            return CallerIdentity.anonymous()

        sub = claims.get("sub")
        if not isinstance(sub, str) or not sub.strip():
            return CallerIdentity.anonymous()

        try:
            subject = ExternalSubject(sub.strip())
        except ValueError:
            return CallerIdentity.anonymous()

        return CallerIdentity(subject=subject, claims=dict(claims))

    @property
    def is_authenticated(self) -> bool:
        return self.subject is not None
