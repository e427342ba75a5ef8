"""
Access Token Store - Lookup and persistence of issued access tokens.

Operations:
- lookup: Find the record behind a token identifier
- save: Persist a newly issued token
- revoke: Mark a token as revoked
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from scitrera_app_framework.api import Plugin, Variables, enabled_option_pattern

from ...config import ORGSWITCH_TOKEN_STORE, DEFAULT_ORGSWITCH_TOKEN_STORE
from ...models.token import AccessTokenRecord

from .._constants import EXT_ACCESS_TOKEN_STORE


class AccessTokenStore(ABC):
    """Interface for access token storage."""

    logger: logging.Logger = None

    @abstractmethod
    def lookup(self, token: str) -> Optional[AccessTokenRecord]:
        """Find the record for a token identifier.

        Args:
            token: Token identifier as presented by the client

        Returns:
            The stored record, or None if the token is unknown
        """
        pass

    @abstractmethod
    def save(self, record: AccessTokenRecord) -> AccessTokenRecord:
        """Persist an issued token, replacing any record with the same identifier."""
        pass

    @abstractmethod
    def revoke(self, token: str) -> bool:
        """Revoke a token.

        Returns:
            True if a record was found and revoked
        """
        pass


# noinspection PyAbstractClass
class AccessTokenStorePluginBase(Plugin):
    """Base plugin for access token store - extensible for custom implementations."""
    PROVIDER_NAME: str = None

    def name(self) -> str:
        return f"{EXT_ACCESS_TOKEN_STORE}|{self.PROVIDER_NAME}"

    def extension_point_name(self, v: Variables) -> str:
        return EXT_ACCESS_TOKEN_STORE

    def is_enabled(self, v: Variables) -> bool:
        return enabled_option_pattern(self, v, ORGSWITCH_TOKEN_STORE, self_attr='PROVIDER_NAME')

    def on_registration(self, v: Variables) -> None:
        v.set_default_value(ORGSWITCH_TOKEN_STORE, DEFAULT_ORGSWITCH_TOKEN_STORE)
