"""Token validation service package."""
from .base import (
    TokenValidator,
    TokenValidatorPluginBase,
    EXT_TOKEN_VALIDATOR,
)

from scitrera_app_framework import Variables, get_extension


def get_token_validator(v: Variables = None) -> TokenValidator:
    """Get the token validation service instance."""
    return get_extension(EXT_TOKEN_VALIDATOR, v)


__all__ = (
    'TokenValidator',
    'TokenValidatorPluginBase',
    'get_token_validator',
    'EXT_TOKEN_VALIDATOR',
)
