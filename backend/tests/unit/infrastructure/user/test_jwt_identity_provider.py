"""Unit tests for JWTIdentityProvider with mocked HTTP calls."""

import os
import pytest
from unittest.mock import AsyncMock, patch, MagicMock

import aiohttp
from jwt.exceptions import ExpiredSignatureError, InvalidIssuerError

from infrastructure.user.jwt_identity_provider import JWTIdentityProvider
from domain.user.auth.ports.identity_provider import InvalidTokenError, JWKSError


MODULE = "infrastructure.user.jwt_identity_provider"


def _mock_session(jwks=None, error=None):
    """aiohttp.ClientSession mock returning ``jwks`` from GET."""
    mock_response = AsyncMock()
    mock_response.raise_for_status = MagicMock()
    mock_response.json = AsyncMock(return_value=jwks)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = AsyncMock()
    if error is not None:
        mock_session.get = MagicMock(side_effect=error)
    else:
        mock_session.get = MagicMock(return_value=mock_response)
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)
    return mock_session


class TestJWTIdentityProvider:
    @pytest.fixture
    def provider(self):
        return JWTIdentityProvider(issuer="https://clerk.example.com/")

    def test_init_strips_trailing_slash_and_builds_jwks_url(self, provider):
        assert provider.issuer == "https://clerk.example.com"
        assert provider.jwks_url == "https://clerk.example.com/.well-known/jwks.json"
        assert provider.audience is None

    def test_init_with_env_vars(self):
        with patch.dict(
            os.environ,
            {"AUTH_ISSUER": "https://issuer.example.com", "AUTH_AUDIENCE": "api"},
        ):
            provider = JWTIdentityProvider()

        assert provider.issuer == "https://issuer.example.com"
        assert provider.audience == "api"

    def test_init_without_issuer_raises_error(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="AUTH_ISSUER is required"):
                JWTIdentityProvider()

    @pytest.mark.asyncio
    async def test_verify_token_success(self, provider):
        claims = {"sub": "user_123", "iss": "https://clerk.example.com", "exp": 9999999999}

        with patch(f"{MODULE}.jwt.get_unverified_header", return_value={"kid": "k1"}):
            with patch(f"{MODULE}.PyJWK") as mock_pyjwk:
                with patch(f"{MODULE}.jwt.decode", return_value=claims) as mock_decode:
                    mock_pyjwk.from_dict.return_value = MagicMock(key="mock_key")
                    provider.jwks_cache["k1"] = {"kty": "RSA", "kid": "k1"}

                    result = await provider.verify_token("token")

        assert result == claims
        kwargs = mock_decode.call_args.kwargs
        assert kwargs["algorithms"] == ["RS256"]
        assert kwargs["issuer"] == "https://clerk.example.com"
        assert kwargs["options"] == {"verify_aud": False}

    @pytest.mark.asyncio
    async def test_audience_checked_when_configured(self):
        provider = JWTIdentityProvider(issuer="https://clerk.example.com", audience="api")

        with patch(f"{MODULE}.jwt.get_unverified_header", return_value={"kid": "k1"}):
            with patch(f"{MODULE}.PyJWK") as mock_pyjwk:
                with patch(f"{MODULE}.jwt.decode", return_value={"sub": "u"}) as mock_decode:
                    mock_pyjwk.from_dict.return_value = MagicMock(key="mock_key")
                    provider.jwks_cache["k1"] = {"kty": "RSA"}

                    await provider.verify_token("token")

        kwargs = mock_decode.call_args.kwargs
        assert kwargs["audience"] == "api"
        assert kwargs["options"] == {"verify_aud": True}

    @pytest.mark.asyncio
    async def test_verify_token_missing_kid(self, provider):
        with patch(f"{MODULE}.jwt.get_unverified_header", return_value={}):
            with pytest.raises(InvalidTokenError, match="missing 'kid'"):
                await provider.verify_token("token")

    @pytest.mark.asyncio
    async def test_verify_token_expired(self, provider):
        with patch(f"{MODULE}.jwt.get_unverified_header", return_value={"kid": "k1"}):
            with patch(f"{MODULE}.PyJWK") as mock_pyjwk:
                with patch(f"{MODULE}.jwt.decode", side_effect=ExpiredSignatureError("exp")):
                    mock_pyjwk.from_dict.return_value = MagicMock(key="mock_key")
                    provider.jwks_cache["k1"] = {"kty": "RSA"}

                    with pytest.raises(InvalidTokenError, match="expired"):
                        await provider.verify_token("token")

    @pytest.mark.asyncio
    async def test_verify_token_wrong_issuer(self, provider):
        with patch(f"{MODULE}.jwt.get_unverified_header", return_value={"kid": "k1"}):
            with patch(f"{MODULE}.PyJWK") as mock_pyjwk:
                with patch(f"{MODULE}.jwt.decode", side_effect=InvalidIssuerError("issuer")):
                    mock_pyjwk.from_dict.return_value = MagicMock(key="mock_key")
                    provider.jwks_cache["k1"] = {"kty": "RSA"}

                    with pytest.raises(InvalidTokenError):
                        await provider.verify_token("token")

    @pytest.mark.asyncio
    async def test_unknown_kid_refreshes_jwks(self, provider):
        jwks = {"keys": [{"kid": "k2", "kty": "RSA"}]}

        with patch(f"{MODULE}.jwt.get_unverified_header", return_value={"kid": "k2"}):
            with patch(f"{MODULE}.PyJWK") as mock_pyjwk:
                with patch(f"{MODULE}.jwt.decode", return_value={"sub": "u"}):
                    with patch("aiohttp.ClientSession", return_value=_mock_session(jwks)):
                        mock_pyjwk.from_dict.return_value = MagicMock(key="mock_key")

                        await provider.verify_token("token")

        assert "k2" in provider.jwks_cache

    @pytest.mark.asyncio
    async def test_kid_absent_after_refresh(self, provider):
        with patch(f"{MODULE}.jwt.get_unverified_header", return_value={"kid": "nope"}):
            with patch("aiohttp.ClientSession", return_value=_mock_session({"keys": []})):
                with pytest.raises(InvalidTokenError, match="not found"):
                    await provider.verify_token("token")

    @pytest.mark.asyncio
    async def test_jwks_failure_is_not_reported_as_invalid_token(self, provider):
        error = aiohttp.ClientError("Connection failed")

        with patch(f"{MODULE}.jwt.get_unverified_header", return_value={"kid": "k1"}):
            with patch("aiohttp.ClientSession", return_value=_mock_session(error=error)):
                with pytest.raises(JWKSError, match="Failed to fetch JWKS"):
                    await provider.verify_token("token")

    @pytest.mark.asyncio
    async def test_refresh_jwks_skips_keys_without_kid(self, provider):
        jwks = {"keys": [{"kty": "RSA"}, {"kid": "k1", "kty": "RSA"}]}

        with patch("aiohttp.ClientSession", return_value=_mock_session(jwks)):
            await provider._refresh_jwks()

        assert list(provider.jwks_cache.keys()) == ["k1"]
