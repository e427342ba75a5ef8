"""Token Validation Service - Pluggable bearer token validation interface."""
from abc import ABC, abstractmethod
from typing import Iterable

from scitrera_app_framework.api import Plugin, Variables, enabled_option_pattern

from ...config import ORGSWITCH_TOKEN_VALIDATOR, DEFAULT_ORGSWITCH_TOKEN_VALIDATOR
from ...models.token import TokenValidationRequest, TokenValidationResult

from .._constants import EXT_TOKEN_VALIDATOR, EXT_ACCESS_TOKEN_STORE


class TokenValidator(ABC):
    """Abstract token validation interface.

    Signature, expiry and revocation checks live behind this interface; callers
    only see validity and the asserted user.
    """

    @abstractmethod
    def validate(self, request: TokenValidationRequest) -> TokenValidationResult:
        """Validate a presented token.

        Args:
            request: Token identifier, token type and validation context

        Returns:
            TokenValidationResult; ``authorized_user`` is the tenant-qualified
            subject when valid
        """
        pass


# noinspection PyAbstractClass
class TokenValidatorPluginBase(Plugin):
    """Base plugin for token validation service."""
    PROVIDER_NAME: str = None

    def name(self) -> str:
        return f"{EXT_TOKEN_VALIDATOR}|{self.PROVIDER_NAME}"

    def extension_point_name(self, v: Variables) -> str:
        return EXT_TOKEN_VALIDATOR

    def is_enabled(self, v: Variables) -> bool:
        return enabled_option_pattern(self, v, ORGSWITCH_TOKEN_VALIDATOR, self_attr='PROVIDER_NAME')

    def on_registration(self, v: Variables) -> None:
        v.set_default_value(ORGSWITCH_TOKEN_VALIDATOR, DEFAULT_ORGSWITCH_TOKEN_VALIDATOR)

    def get_dependencies(self, v: Variables) -> Iterable[str]:
        return (EXT_ACCESS_TOKEN_STORE,)
