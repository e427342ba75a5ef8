"""Token validation against the access token store."""
from logging import Logger

from scitrera_app_framework import get_logger
from scitrera_app_framework.api import Variables

from .base import TokenValidator, TokenValidatorPluginBase
from .._constants import EXT_ACCESS_TOKEN_STORE
from ..token_store import AccessTokenStore
from ...models.token import TOKEN_TYPE_BEARER, TokenValidationRequest, TokenValidationResult


class StoreBackedTokenValidator(TokenValidator):
    """Bearer tokens are valid while the store holds an active record for them."""

    def __init__(self, token_store: AccessTokenStore, v: Variables = None):
        self.token_store = token_store
        self.logger = get_logger(v, name=self.__class__.__name__)

    def validate(self, request: TokenValidationRequest) -> TokenValidationResult:
        if request.token_type.lower() != TOKEN_TYPE_BEARER:
            return TokenValidationResult(
                valid=False,
                error_message=f"Unsupported token type: {request.token_type}",
            )

        record = self.token_store.lookup(request.token_identifier)
        if record is None:
            return TokenValidationResult(valid=False, error_message="Token not found")
        if record.revoked:
            return TokenValidationResult(valid=False, error_message="Token has been revoked")
        if record.is_expired:
            return TokenValidationResult(valid=False, error_message="Token has expired")

        return TokenValidationResult(
            valid=True,
            authorized_user=record.authorized_user.to_subject_identifier(),
            scope=list(record.scope),
        )


class StoreBackedTokenValidatorPlugin(TokenValidatorPluginBase):
    """Plugin for store backed token validation."""
    PROVIDER_NAME = 'default'

    def initialize(self, v: Variables, logger: Logger) -> TokenValidator:
        token_store: AccessTokenStore = self.get_extension(EXT_ACCESS_TOKEN_STORE, v)
        return StoreBackedTokenValidator(token_store=token_store, v=v)
