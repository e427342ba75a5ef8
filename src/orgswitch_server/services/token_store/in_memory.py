"""In-memory access token store."""
from logging import Logger
from typing import Optional

from scitrera_app_framework import get_logger
from scitrera_app_framework.api import Variables

from .base import AccessTokenStore, AccessTokenStorePluginBase
from ...models.token import AccessTokenRecord


class InMemoryAccessTokenStore(AccessTokenStore):
    """
    Access token store backed by a dict.

    All tokens are lost on service restart.
    """

    def __init__(self, v: Variables = None):
        # {access_token -> AccessTokenRecord}
        self._tokens: dict[str, AccessTokenRecord] = {}
        self.logger = get_logger(v, name=self.__class__.__name__)
        self.logger.info("Initialized AccessTokenStore with in-memory storage")

    def lookup(self, token: str) -> Optional[AccessTokenRecord]:
        if not token:
            return None
        return self._tokens.get(token)

    def save(self, record: AccessTokenRecord) -> AccessTokenRecord:
        self._tokens[record.access_token] = record
        self.logger.debug(
            "Stored access token for user: %s (client=%s, grant=%s)",
            record.authorized_user, record.client_id, record.grant_type,
        )
        return record

    def revoke(self, token: str) -> bool:
        record = self._tokens.get(token)
        if record is None:
            return False
        self._tokens[token] = record.model_copy(update={"revoked": True})
        self.logger.info("Revoked access token for user: %s", record.authorized_user)
        return True


class InMemoryAccessTokenStorePlugin(AccessTokenStorePluginBase):
    """Plugin for the in-memory access token store."""
    PROVIDER_NAME = 'in-memory'

    def initialize(self, v: Variables, logger: Logger) -> AccessTokenStore:
        return InMemoryAccessTokenStore(v=v)
