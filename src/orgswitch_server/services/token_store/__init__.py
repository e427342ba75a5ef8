"""Access token store package."""
from .base import (
    AccessTokenStore,
    AccessTokenStorePluginBase,
    EXT_ACCESS_TOKEN_STORE,
)

from scitrera_app_framework import Variables, get_extension


def get_access_token_store(v: Variables = None) -> AccessTokenStore:
    """Get the access token store instance."""
    return get_extension(EXT_ACCESS_TOKEN_STORE, v)


__all__ = (
    'AccessTokenStore',
    'AccessTokenStorePluginBase',
    'get_access_token_store',
    'EXT_ACCESS_TOKEN_STORE',
)
