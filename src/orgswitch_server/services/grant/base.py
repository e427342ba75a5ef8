"""
Grant Handlers - Two-phase token endpoint contract per OAuth2 grant type.

Every grant type is served by one handler:
1. validate_grant: check the request and populate the TokenRequestContext
2. issue: mint the token from the populated context
"""
from abc import ABC, abstractmethod
from logging import Logger
from typing import Iterable, Optional

from scitrera_app_framework.api import Plugin, Variables

from ...models.request import RequestParameter, TokenRequestContext
from ...models.token import AccessTokenResponse

from .._constants import EXT_MULTI_GRANT_HANDLERS, EXT_GRANT_HANDLER_REGISTRY


def extract_parameter(parameters: Optional[Iterable[RequestParameter]], key: str) -> Optional[str]:
    """First value of the parameter named ``key`` (exact match), or None."""
    if not parameters:
        return None
    for parameter in parameters:
        if parameter.key == key and parameter.value:
            return parameter.value[0]
    return None


class AuthorizationGrantHandler(ABC):
    """Abstract grant handler interface."""

    GRANT_TYPE: str = None

    @property
    def grant_type(self) -> str:
        return self.GRANT_TYPE

    @abstractmethod
    def validate_grant(self, context: TokenRequestContext) -> bool:
        """Validate the grant and populate the context for issuance.

        Args:
            context: Per-request issuance context

        Returns:
            True when the grant is valid

        Raises:
            OAuth2ClientError: If the request is rejected
            OAuth2ServerError: If a collaborator fails
        """
        pass

    @abstractmethod
    def issue(self, context: TokenRequestContext) -> AccessTokenResponse:
        """Issue the token for a context that passed ``validate_grant``."""
        pass


class GrantHandlerPluginBase(Plugin, ABC):
    """
    Base class for grant handler plugins.

    Grant handlers are auto-discovered via the EXT_MULTI_GRANT_HANDLERS extension point
    and collected by the grant handler registry during startup.

    Subclasses must implement:
    - initialize(v, logger): Build the AuthorizationGrantHandler
    """

    @abstractmethod
    def initialize(self, v: Variables, logger: Logger) -> AuthorizationGrantHandler:
        """Build the grant handler served by this plugin."""
        pass

    def extension_point_name(self, v: Variables) -> str:
        return EXT_MULTI_GRANT_HANDLERS

    def is_enabled(self, v: Variables) -> bool:
        return False  # disable "single" extension for a multi-extension plugin

    def is_multi_extension(self, v: Variables) -> bool:
        return True


__all__ = (
    'AuthorizationGrantHandler',
    'GrantHandlerPluginBase',
    'extract_parameter',
    'EXT_MULTI_GRANT_HANDLERS',
    'EXT_GRANT_HANDLER_REGISTRY',
)
