"""Grant Handler Registry - grant type routing for the token endpoint."""
from logging import Logger
from typing import Iterable, Optional

from scitrera_app_framework import Plugin, Variables, get_extensions
from scitrera_app_framework.api import enabled_option_pattern, ext_parse_csv

from .base import AuthorizationGrantHandler, EXT_GRANT_HANDLER_REGISTRY, EXT_MULTI_GRANT_HANDLERS
from .._constants import (
    EXT_ACCESS_TOKEN_STORE,
    EXT_ORGANIZATION_RESOLVER,
    EXT_TOKEN_ISSUER,
    EXT_TOKEN_VALIDATOR,
)
from ...config import (
    ORGSWITCH_GRANT_REGISTRY,
    DEFAULT_ORGSWITCH_GRANT_REGISTRY,
    ORGSWITCH_DISABLED_GRANT_TYPES,
)
from ...exceptions import UnsupportedGrantTypeError
from ...models.request import TokenRequestContext
from ...models.token import AccessTokenResponse


class GrantHandlerRegistry:
    """Registry of grant handlers keyed by grant type."""

    def __init__(self, handlers: Optional[Iterable[AuthorizationGrantHandler]] = None):
        self._handlers: dict[str, AuthorizationGrantHandler] = {}
        for handler in handlers or ():
            self.register(handler)

    def register(self, handler: AuthorizationGrantHandler) -> None:
        """Register a handler under its grant type, replacing any previous one."""
        if not handler.grant_type:
            raise ValueError(f"Grant handler {handler.__class__.__name__} does not declare a grant type")
        self._handlers[handler.grant_type] = handler

    def get_handler(self, grant_type: Optional[str]) -> AuthorizationGrantHandler:
        """Get the handler for a grant type.

        Raises:
            UnsupportedGrantTypeError: If no handler serves the grant type
        """
        handler = self._handlers.get(grant_type) if grant_type else None
        if handler is None:
            raise UnsupportedGrantTypeError(grant_type)
        return handler

    def handle(self, context: TokenRequestContext) -> AccessTokenResponse:
        """Run both grant phases for a token request."""
        handler = self.get_handler(context.grant_type)
        handler.validate_grant(context)
        return handler.issue(context)

    @property
    def grant_types(self) -> list[str]:
        """All served grant types."""
        return sorted(self._handlers.keys())


# noinspection PyAbstractClass
class GrantHandlerRegistryPluginBase(Plugin):
    """Base plugin for grant handler registry."""
    PROVIDER_NAME: str = None

    def name(self) -> str:
        return f"{EXT_GRANT_HANDLER_REGISTRY}|{self.PROVIDER_NAME}"

    def extension_point_name(self, v: Variables) -> str:
        return EXT_GRANT_HANDLER_REGISTRY

    def is_enabled(self, v: Variables) -> bool:
        return enabled_option_pattern(self, v, ORGSWITCH_GRANT_REGISTRY, self_attr='PROVIDER_NAME')

    def on_registration(self, v: Variables) -> None:
        v.set_default_value(ORGSWITCH_GRANT_REGISTRY, DEFAULT_ORGSWITCH_GRANT_REGISTRY)


class DefaultGrantHandlerRegistryPlugin(GrantHandlerRegistryPluginBase):
    """Default plugin that collects every registered grant handler extension.

    Grant types listed in ORGSWITCH_DISABLED_GRANT_TYPES are left out.
    """
    PROVIDER_NAME = 'default'

    def initialize(self, v: Variables, logger: Logger) -> GrantHandlerRegistry:
        disabled = set(v.environ(ORGSWITCH_DISABLED_GRANT_TYPES, default=[], type_fn=ext_parse_csv) or [])

        registry = GrantHandlerRegistry()
        for ext_name, handler in get_extensions(EXT_MULTI_GRANT_HANDLERS, v).items():
            if handler.grant_type in disabled:
                logger.info("Grant registry: grant type '%s' disabled, skipping %s", handler.grant_type, ext_name)
                continue
            registry.register(handler)
            logger.info("Grant registry: '%s' served by %s", handler.grant_type, ext_name)

        logger.info("Grant registry initialized: %s", ', '.join(registry.grant_types) or '(none)')
        return registry

    def get_dependencies(self, v: Variables) -> Iterable[str]:
        # grant handlers are built from these services
        return (EXT_TOKEN_VALIDATOR, EXT_ACCESS_TOKEN_STORE, EXT_ORGANIZATION_RESOLVER, EXT_TOKEN_ISSUER,)
