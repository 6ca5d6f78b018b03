"""Identity provider port (interface)."""

from abc import ABC, abstractmethod
from typing import Dict, Any


class IIdentityProvider(ABC):
    """Identity provider interface.

    Abstracts the third-party authentication service that issues the
    bearer tokens. Allows mocking in tests and swapping providers.
    """

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify a JWT and return its claims.

        Args:
            token: JWT from the Authorization header

        Returns:
            Claims dictionary with at minimum:
            - sub: external subject identifier
            - iss: issuer (must match the configured issuer)
            - exp: expiration timestamp

        Raises:
            InvalidTokenError: Token is invalid, expired, or has wrong issuer/audience
            JWKSError: Cannot fetch or use the provider's public keys
        """
        pass


class InvalidTokenError(Exception):
    """Token verification failed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid token: {reason}")


class JWKSError(Exception):
    """JWKS fetching or processing failed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"JWKS error: {reason}")
