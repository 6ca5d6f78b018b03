"""JWT identity provider backed by the issuer's JWKS endpoint."""

from typing import Dict, Any, Optional
import logging
import aiohttp
import jwt
from jwt import PyJWK
from jwt.exceptions import InvalidTokenError as JWTError, ExpiredSignatureError
from cachetools import TTLCache

from domain.user.auth.ports.identity_provider import (
    IIdentityProvider,
    InvalidTokenError,
    JWKSError,
)
from infrastructure.config import get_auth_issuer, get_auth_audience

logger = logging.getLogger(__name__)


class JWTIdentityProvider(IIdentityProvider):
    """Verifies RS256 bearer tokens issued by an external identity provider.

    Features:
    - RS256 JWT verification with JWKS
    - JWKS caching with 1-hour TTL, refreshed on unknown ``kid``
    - Issuer validation, audience validation when configured

    Environment Variables:
    - AUTH_ISSUER: Issuer URL (e.g., "https://clerk.example.com")
    - AUTH_AUDIENCE: Expected audience (optional)

    Examples:
        >>> provider = JWTIdentityProvider()
        >>> claims = await provider.verify_token(token)
        >>> claims["sub"]
        'user_2abc'
    """

    def __init__(
        self,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
        jwks_cache_ttl: int = 3600,
    ):
        """Initialize provider.

        Args:
            issuer: Issuer URL (defaults to env AUTH_ISSUER)
            audience: Expected audience (defaults to env AUTH_AUDIENCE)
            jwks_cache_ttl: JWKS cache TTL in seconds (default: 3600 = 1h)

        Raises:
            ValueError: If no issuer is configured
        """
        self.issuer = (issuer or get_auth_issuer() or "").rstrip("/")
        self.audience = audience or get_auth_audience()

        if not self.issuer:
            raise ValueError("AUTH_ISSUER is required")

        self.jwks_url = f"{self.issuer}/.well-known/jwks.json"
        self.jwks_cache: TTLCache[str, Dict[str, Any]] = TTLCache(maxsize=10, ttl=jwks_cache_ttl)

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify JWT token using the issuer's JWKS.

        Returns:
            Decoded JWT claims dictionary

        Raises:
            InvalidTokenError: If token is invalid, expired, or malformed
            JWKSError: If JWKS fetching fails
        """
        try:
            unverified_header = jwt.get_unverified_header(token)
            kid = unverified_header.get("kid")

            if not kid:
                raise InvalidTokenError("token header missing 'kid'")

            if kid not in self.jwks_cache:
                await self._refresh_jwks()

            jwk_dict = self.jwks_cache.get(kid)
            if not jwk_dict:
                raise InvalidTokenError(f"JWKS key {kid} not found")

            jwk = PyJWK.from_dict(jwk_dict)

            options = {"verify_aud": self.audience is not None}
            payload: Dict[str, Any] = jwt.decode(
                token,
                jwk.key,
                algorithms=["RS256"],
                audience=self.audience,
                issuer=self.issuer,
                options=options,
            )

            return payload

        except (InvalidTokenError, JWKSError):
            raise
        except ExpiredSignatureError as e:
            raise InvalidTokenError("token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e
        except Exception as e:
            raise InvalidTokenError(f"verification failed: {e}") from e

    async def _refresh_jwks(self) -> None:
        """Refresh JWKS from the issuer's well-known endpoint.

        Raises:
            JWKSError: If JWKS fetching fails
        """
        try:
            async with aiohttp.ClientSession() as session:
                timeout = aiohttp.ClientTimeout(total=5)
                async with session.get(self.jwks_url, timeout=timeout) as resp:
                    resp.raise_for_status()
                    jwks = await resp.json()

            for key in jwks.get("keys", []):
                kid = key.get("kid")
                if kid:
                    self.jwks_cache[kid] = key

            logger.debug("JWKS refreshed", extra={"jwks_url": self.jwks_url})

        except aiohttp.ClientError as e:
            raise JWKSError(f"Failed to fetch JWKS: {e}") from e
        except Exception as e:
            raise JWKSError(f"Failed to parse JWKS: {e}") from e
