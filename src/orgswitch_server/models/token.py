"""
Access token, token binding and token validation models.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .user import AuthenticatedUser
from ..utils.datetime import utc_now

TOKEN_TYPE_BEARER = "bearer"


class TokenBinding(BaseModel):
    """Opaque reference tying a token to a client context (device, session, cookie...)."""

    model_config = {"frozen": True}

    binding_type: str = Field(..., description="Binding type (e.g., 'cookie', 'sso-session')")
    binding_reference: str = Field(..., description="Stable reference to the bound context")
    binding_value: Optional[str] = Field(None, description="Raw binding value, if retained")


class AccessTokenRecord(BaseModel):
    """Persisted view of an issued access token."""

    model_config = {"from_attributes": True}

    access_token: str = Field(..., description="Token identifier")
    authorized_user: AuthenticatedUser = Field(..., description="User the token was issued for")
    client_id: Optional[str] = Field(None, description="OAuth2 client the token was issued to")
    scope: list[str] = Field(default_factory=list, description="Granted scopes")
    token_type: str = Field(TOKEN_TYPE_BEARER, description="Token type")
    token_binding: Optional[TokenBinding] = Field(None, description="Binding carried by the token")
    grant_type: Optional[str] = Field(None, description="Grant the token was issued through")
    revoked: bool = Field(False, description="Whether the token has been revoked")

    issued_at: datetime = Field(
        default_factory=utc_now,
        description="Issue timestamp"
    )
    expires_at: Optional[datetime] = Field(None, description="Expiry timestamp (None = no expiry)")

    @property
    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return self.expires_at is not None and utc_now() > self.expires_at

    @property
    def is_active(self) -> bool:
        """Token is neither revoked nor expired."""
        return not self.revoked and not self.is_expired


class TokenValidationContextParam(BaseModel):
    """Key/value hint passed along with a token validation request."""

    key: Optional[str] = None
    value: Optional[str] = None


class TokenValidationRequest(BaseModel):
    """Request to validate a presented token."""

    token_identifier: str = Field(..., description="Presented token value")
    token_type: str = Field(TOKEN_TYPE_BEARER, description="Presented token type")
    context: list[TokenValidationContextParam] = Field(default_factory=list)


class TokenValidationResult(BaseModel):
    """Outcome of a token validation."""

    valid: bool
    authorized_user: Optional[str] = Field(
        None,
        description="Tenant-qualified subject the token was issued for (when valid)"
    )
    scope: list[str] = Field(default_factory=list)
    error_message: Optional[str] = None


class AccessTokenResponse(BaseModel):
    """RFC 6749 section 5.1 access token response."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    scope: Optional[str] = Field(None, description="Space-delimited granted scopes")
