"""Default token issuer: opaque tokens persisted to the access token store."""
from logging import Logger

from scitrera_app_framework import get_logger
from scitrera_app_framework.api import Variables

from .base import TokenIssuer, TokenIssuerPluginBase
from .._constants import EXT_ACCESS_TOKEN_STORE
from ..token_store import AccessTokenStore
from ...config import ORGSWITCH_ACCESS_TOKEN_TTL_SECONDS, DEFAULT_ORGSWITCH_ACCESS_TOKEN_TTL_SECONDS
from ...models.request import TokenRequestContext
from ...models.token import AccessTokenRecord, AccessTokenResponse
from ...utils.datetime import utc_now, utc_after
from ...utils.token_generation import generate_token


class DefaultTokenIssuer(TokenIssuer):
    """
    Issues opaque bearer tokens.

    Every issued token is written back to the access token store, so a token
    obtained through a grant can itself be presented to another grant.
    """

    def __init__(
            self,
            token_store: AccessTokenStore,
            default_validity_period: int = DEFAULT_ORGSWITCH_ACCESS_TOKEN_TTL_SECONDS,
            v: Variables = None,
    ):
        self.token_store = token_store
        self.default_validity_period = default_validity_period
        self.logger = get_logger(v, name=self.__class__.__name__)

    def issue(self, context: TokenRequestContext) -> AccessTokenResponse:
        if context.authorized_user is None:
            raise ValueError("Cannot issue a token without an authorized user")

        validity_period = self.default_validity_period
        if context.validity_period is not None:
            validity_period = context.validity_period
        record = AccessTokenRecord(
            access_token=generate_token("at"),
            authorized_user=context.authorized_user,
            client_id=context.request.client_id,
            scope=list(context.scope),
            token_binding=context.token_binding,
            grant_type=context.grant_type,
            issued_at=utc_now(),
            expires_at=utc_after(validity_period),
        )
        self.token_store.save(record)

        self.logger.info(
            "Issued access token via %s for user: %s (accessing organization: %s)",
            context.grant_type, record.authorized_user, record.authorized_user.accessing_organization,
        )
        return AccessTokenResponse(
            access_token=record.access_token,
            expires_in=validity_period,
            scope=" ".join(record.scope) or None,
        )


class DefaultTokenIssuerPlugin(TokenIssuerPluginBase):
    """Default token issuer plugin."""
    PROVIDER_NAME = 'default'

    def initialize(self, v: Variables, logger: Logger) -> TokenIssuer:
        token_store: AccessTokenStore = self.get_extension(EXT_ACCESS_TOKEN_STORE, v)
        validity_period = v.environ(
            ORGSWITCH_ACCESS_TOKEN_TTL_SECONDS,
            default=DEFAULT_ORGSWITCH_ACCESS_TOKEN_TTL_SECONDS,
            type_fn=int,
        )
        return DefaultTokenIssuer(token_store=token_store, default_validity_period=validity_period, v=v)
