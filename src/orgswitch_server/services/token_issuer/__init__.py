"""Token issuer package."""
from .base import (
    TokenIssuer,
    TokenIssuerPluginBase,
    EXT_TOKEN_ISSUER,
)

from scitrera_app_framework import Variables, get_extension


def get_token_issuer(v: Variables = None) -> TokenIssuer:
    """Get the token issuer instance."""
    return get_extension(EXT_TOKEN_ISSUER, v)


__all__ = (
    'TokenIssuer',
    'TokenIssuerPluginBase',
    'get_token_issuer',
    'EXT_TOKEN_ISSUER',
)
