"""FastAPI authentication middleware."""

import logging
from typing import Optional, Any
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from domain.user.auth.ports.identity_provider import (
    IIdentityProvider,
    InvalidTokenError,
    JWKSError,
)
from infrastructure.config import is_auth_required

logger = logging.getLogger(__name__)


class AuthMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for JWT authentication.

    Verifies the bearer token from the Authorization header and sets
    ``request.state.auth_claims`` for downstream handlers (None when the
    request is anonymous).

    Environment Variables:
    - AUTH_REQUIRED: "true" to reject requests without a token (default: "false")

    Examples:
        >>> app.add_middleware(AuthMiddleware, identity_provider=provider)
        >>> # In route handler:
        >>> claims = request.state.auth_claims
    """

    def __init__(
        self,
        app: Any,
        identity_provider: IIdentityProvider,
        auth_required: Optional[bool] = None,
    ) -> None:
        super().__init__(app)
        self.identity_provider = identity_provider
        self.auth_required = is_auth_required() if auth_required is None else auth_required

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        """Verify the bearer token, then hand off to the next handler.

        Returns:
            Response from handler or 401/500 error
        """
        token = self._extract_token(request.headers.get("Authorization"))

        if not token:
            if self.auth_required:
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={"error": "unauthorized", "message": "Missing authorization token"},
                )
            request.state.auth_claims = None
            return await call_next(request)

        try:
            claims = await self.identity_provider.verify_token(token)
            request.state.auth_claims = claims

        except InvalidTokenError as e:
            logger.info("Rejected bearer token", extra={"reason": e.reason})
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "invalid_token", "message": str(e)},
            )

        except JWKSError as e:
            # Server-side failure, not the client's
            logger.error("JWKS unavailable", extra={"reason": e.reason})
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "authentication_error",
                    "message": "Authentication service error",
                },
            )

        return await call_next(request)

    def _extract_token(self, auth_header: Optional[str]) -> Optional[str]:
        """Extract Bearer token from Authorization header.

        Examples:
            >>> self._extract_token("Bearer eyJ...")
            'eyJ...'
            >>> self._extract_token("eyJ...")  # Missing Bearer
            None
        """
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2:
            return None

        scheme, token = parts
        if scheme.lower() != "bearer":
            return None

        return token
