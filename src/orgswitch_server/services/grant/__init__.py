"""Grant handler package."""
from .base import (
    AuthorizationGrantHandler,
    GrantHandlerPluginBase,
    extract_parameter,
    EXT_GRANT_HANDLER_REGISTRY,
    EXT_MULTI_GRANT_HANDLERS,
)
from .organization_switch import (
    OrganizationSwitchGrantHandler,
    GRANT_TYPE_ORGANIZATION_SWITCH,
    ORG_PARAM,
    TOKEN_PARAM,
    build_switched_user,
    check_organization_is_allowed_to_switch,
)
from .registry import GrantHandlerRegistry

from scitrera_app_framework import Variables, get_extension


def get_grant_handler_registry(v: Variables = None) -> GrantHandlerRegistry:
    """Get the grant handler registry instance."""
    return get_extension(EXT_GRANT_HANDLER_REGISTRY, v)


__all__ = (
    'AuthorizationGrantHandler',
    'GrantHandlerPluginBase',
    'GrantHandlerRegistry',
    'OrganizationSwitchGrantHandler',
    'GRANT_TYPE_ORGANIZATION_SWITCH',
    'ORG_PARAM',
    'TOKEN_PARAM',
    'build_switched_user',
    'check_organization_is_allowed_to_switch',
    'extract_parameter',
    'get_grant_handler_registry',
    'EXT_GRANT_HANDLER_REGISTRY',
    'EXT_MULTI_GRANT_HANDLERS',
)
