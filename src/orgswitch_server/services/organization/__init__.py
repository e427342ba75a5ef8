"""Organization resolver package."""
from .base import (
    OrganizationResolver,
    OrganizationResolverPluginBase,
    OrganizationManagementError,
    OrganizationNotFoundError,
    ERROR_CODE_ORGANIZATION_NOT_FOUND_FOR_TENANT,
    NOT_IN_SAME_BRANCH,
    EXT_ORGANIZATION_RESOLVER,
)

from scitrera_app_framework import Variables, get_extension


def get_organization_resolver(v: Variables = None) -> OrganizationResolver:
    """Get the organization resolver instance."""
    return get_extension(EXT_ORGANIZATION_RESOLVER, v)


__all__ = (
    'OrganizationResolver',
    'OrganizationResolverPluginBase',
    'OrganizationManagementError',
    'OrganizationNotFoundError',
    'ERROR_CODE_ORGANIZATION_NOT_FOUND_FOR_TENANT',
    'NOT_IN_SAME_BRANCH',
    'get_organization_resolver',
    'EXT_ORGANIZATION_RESOLVER',
)
