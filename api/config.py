"""
API configuration settings.
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class APIConfig(BaseSettings):
    """API configuration settings."""

    # API Settings
    api_title: str = "Book Catalog Service"
    api_version: str = "1.0"
    api_description: str = "A service providing book catalog."

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # OAuth2 / JWT Settings
    oauth_issuer_uri: str = "http://localhost:8080/realms/book-catalog"
    oauth_client_id: str = "book-catalog"
    jwt_algorithms: str = "RS256"  # Comma-separated list of accepted algorithms
    jwt_secret_key: Optional[str] = None  # Shared secret for HS* tokens
    jwt_public_key: Optional[str] = None  # PEM public key; the issuer JWKS is used when unset
    jwt_audience: Optional[str] = None
    jwks_timeout: float = 5.0

    # CORS Settings
    cors_origins: list = ["*"]  # Configure appropriately for production
    cors_allow_credentials: bool = True
    cors_allow_methods: list = ["*"]
    cors_allow_headers: list = ["*"]

    model_config = {
        "env_file": ".env",
        "extra": "ignore"  # Ignore extra fields from .env
    }

    @property
    def issuer(self) -> str:
        return self.oauth_issuer_uri.rstrip("/")

    @property
    def authorization_url(self) -> str:
        """OpenID Connect authorization endpoint of the issuer."""
        return f"{self.issuer}/protocol/openid-connect/auth"

    @property
    def jwks_url(self) -> str:
        """OpenID Connect key set endpoint of the issuer."""
        return f"{self.issuer}/protocol/openid-connect/certs"

    @property
    def allowed_algorithms(self) -> List[str]:
        return [alg.strip() for alg in self.jwt_algorithms.split(",") if alg.strip()]


# Global config instance
config = APIConfig()
