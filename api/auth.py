"""
OAuth2 bearer authentication for the FastAPI API.

Tokens are JWTs issued by the configured OpenID Connect provider. The
OpenAPI document advertises the provider's implicit flow so the Swagger UI
can obtain a token.
"""

from typing import Any, Dict, Optional, Union

import httpx
import structlog
from fastapi import Depends, HTTPException, status
from fastapi.openapi.models import OAuthFlowImplicit, OAuthFlows as OAuthFlowsModel
from fastapi.security import OAuth2
from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError, jwt

from api.config import APIConfig, config
from api.models import TokenClaims

logger = structlog.get_logger(__name__)

OAUTH_SCHEME_NAME = "security_scheme"

# Security scheme
oauth2_scheme = OAuth2(
    flows=OAuthFlowsModel(
        implicit=OAuthFlowImplicit(
            authorizationUrl=config.authorization_url,
            scopes={"openid": "openid"},
        )
    ),
    scheme_name=OAUTH_SCHEME_NAME,
    auto_error=False,
)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class TokenVerifier:
    """Verifies bearer JWTs against the configured key or the issuer's key set."""

    def __init__(self, settings: APIConfig):
        self.settings = settings
        self._jwks: Optional[Dict[str, Any]] = None

    async def fetch_jwks(self) -> Dict[str, Any]:
        """
        Fetch the issuer's JSON Web Key Set.

        Returns:
            The key set document

        Raises:
            httpx.HTTPError: If the key set cannot be retrieved
        """
        async with httpx.AsyncClient(timeout=self.settings.jwks_timeout) as client:
            response = await client.get(self.settings.jwks_url)
            response.raise_for_status()
            logger.info("Fetched issuer key set", jwks_url=self.settings.jwks_url)
            return response.json()

    async def get_verification_key(self) -> Union[str, Dict[str, Any]]:
        if self.settings.jwt_secret_key:
            return self.settings.jwt_secret_key
        if self.settings.jwt_public_key:
            return self.settings.jwt_public_key
        if self._jwks is None:
            self._jwks = await self.fetch_jwks()
        return self._jwks

    async def verify(self, token: str) -> TokenClaims:
        """
        Verify a bearer token.

        Args:
            token: Encoded JWT

        Returns:
            TokenClaims of the verified token

        Raises:
            HTTPException: 401 if the token is invalid, 503 if the key set is unavailable
        """
        try:
            key = await self.get_verification_key()
        except httpx.HTTPError as e:
            logger.error("Failed to fetch issuer key set", jwks_url=self.settings.jwks_url, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Authentication service unavailable",
            )

        try:
            claims = jwt.decode(
                token,
                key,
                algorithms=self.settings.allowed_algorithms,
                audience=self.settings.jwt_audience,
                issuer=self.settings.issuer,
                options={"verify_aud": self.settings.jwt_audience is not None},
            )
        except JWTError as e:
            logger.warning("Invalid bearer token", error=str(e))
            raise _unauthorized("Invalid authentication credentials")

        subject = claims.get("sub")
        if not subject:
            logger.warning("Bearer token without subject")
            raise _unauthorized("Invalid authentication credentials")

        return TokenClaims(
            sub=subject,
            preferred_username=claims.get("preferred_username"),
            scopes=str(claims.get("scope", "")).split(),
            claims=claims,
        )


token_verifier = TokenVerifier(config)


def get_token_verifier() -> TokenVerifier:
    """Dependency returning the process-wide token verifier."""
    return token_verifier


async def verify_token(
    authorization: Optional[str] = Depends(oauth2_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> TokenClaims:
    """
    Verify the bearer token of a request.

    Args:
        authorization: Raw Authorization header
        verifier: Token verifier

    Returns:
        Claims of the authenticated caller

    Raises:
        HTTPException: If the token is missing or invalid
    """
    scheme, token = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "bearer" or not token:
        raise _unauthorized("Not authenticated")

    return await verifier.verify(token)
