"""Token Issuer - Mints access tokens from a validated token request context."""
from abc import ABC, abstractmethod
from typing import Iterable

from scitrera_app_framework.api import Plugin, Variables, enabled_option_pattern

from ...config import ORGSWITCH_TOKEN_ISSUER, DEFAULT_ORGSWITCH_TOKEN_ISSUER
from ...models.request import TokenRequestContext
from ...models.token import AccessTokenResponse

from .._constants import EXT_TOKEN_ISSUER, EXT_ACCESS_TOKEN_STORE


class TokenIssuer(ABC):
    """Abstract token issuer interface."""

    @abstractmethod
    def issue(self, context: TokenRequestContext) -> AccessTokenResponse:
        """Issue an access token.

        Args:
            context: Validated context carrying the authorized user, scope and
                token binding

        Returns:
            Access token response
        """
        pass


# noinspection PyAbstractClass
class TokenIssuerPluginBase(Plugin):
    """Base plugin for token issuer."""
    PROVIDER_NAME: str = None

    def name(self) -> str:
        return f"{EXT_TOKEN_ISSUER}|{self.PROVIDER_NAME}"

    def extension_point_name(self, v: Variables) -> str:
        return EXT_TOKEN_ISSUER

    def is_enabled(self, v: Variables) -> bool:
        return enabled_option_pattern(self, v, ORGSWITCH_TOKEN_ISSUER, self_attr='PROVIDER_NAME')

    def on_registration(self, v: Variables) -> None:
        v.set_default_value(ORGSWITCH_TOKEN_ISSUER, DEFAULT_ORGSWITCH_TOKEN_ISSUER)

    def get_dependencies(self, v: Variables) -> Iterable[str]:
        return (EXT_ACCESS_TOKEN_STORE,)
