"""
Core domain models for the organization switch grant.

Exports all models for users, tokens, token requests and organizations.
"""
from .organization import Organization
from .request import (
    AccessTokenRequest,
    RequestParameter,
    TokenRequestContext,
)
from .token import (
    TOKEN_TYPE_BEARER,
    AccessTokenRecord,
    AccessTokenResponse,
    TokenBinding,
    TokenValidationContextParam,
    TokenValidationRequest,
    TokenValidationResult,
)
from .user import AuthenticatedUser

__all__ = [
    "AccessTokenRecord",
    "AccessTokenRequest",
    "AccessTokenResponse",
    "AuthenticatedUser",
    "Organization",
    "RequestParameter",
    "TOKEN_TYPE_BEARER",
    "TokenBinding",
    "TokenRequestContext",
    "TokenValidationContextParam",
    "TokenValidationRequest",
    "TokenValidationResult",
]
