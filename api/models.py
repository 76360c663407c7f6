"""
API models and schemas for the FastAPI application.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """Claims of a verified bearer token."""
    sub: str = Field(..., description="Subject of the token")
    preferred_username: Optional[str] = Field(None, description="User name, when the issuer provides one")
    scopes: List[str] = Field(default_factory=list, description="Granted scopes")
    claims: Dict[str, Any] = Field(default_factory=dict, description="All token claims")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
    status_code: int = Field(..., description="HTTP status code")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    database_status: str = Field(..., description="Database connection status")
