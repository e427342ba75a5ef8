"""
Organization Resolver - Tenant to organization mapping and hierarchy queries.

Operations:
- resolve_organization_id: Organization mapped to a tenant domain
- get_relative_depth_between_organizations_in_same_branch: Hierarchy distance
  between two organizations, or a negative value when they share no branch
"""
from abc import ABC, abstractmethod
from typing import Optional

from scitrera_app_framework.api import Plugin, Variables, enabled_option_pattern

from ...config import ORGSWITCH_ORGANIZATION_RESOLVER, DEFAULT_ORGSWITCH_ORGANIZATION_RESOLVER

from .._constants import EXT_ORGANIZATION_RESOLVER

# Error codes
ERROR_CODE_ORGANIZATION_NOT_FOUND_FOR_TENANT = "ORG-60001"
ERROR_CODE_INVALID_ORGANIZATION_HIERARCHY = "ORG-65001"

# Relative depth reported for organizations that are not in the same branch
NOT_IN_SAME_BRANCH = -1


class OrganizationManagementError(Exception):
    """Raised when an organization lookup fails."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class OrganizationNotFoundError(OrganizationManagementError):
    """Raised when a tenant domain has no mapped organization."""

    def __init__(self, tenant_domain: str):
        super().__init__(
            f"Organization not found for tenant: {tenant_domain}",
            code=ERROR_CODE_ORGANIZATION_NOT_FOUND_FOR_TENANT,
        )
        self.tenant_domain = tenant_domain


class OrganizationResolver(ABC):
    """Abstract organization resolver interface."""

    @abstractmethod
    def resolve_organization_id(self, tenant_domain: str) -> str:
        """Resolve the organization mapped to a tenant domain.

        Args:
            tenant_domain: Tenant domain

        Returns:
            Organization ID

        Raises:
            OrganizationNotFoundError: If the tenant has no mapped organization
            OrganizationManagementError: On any other lookup failure
        """
        pass

    @abstractmethod
    def get_relative_depth_between_organizations_in_same_branch(
            self,
            first_organization_id: str,
            second_organization_id: str,
    ) -> int:
        """Hierarchy distance between two organizations.

        Args:
            first_organization_id: Organization ID
            second_organization_id: Organization ID

        Returns:
            Non-negative number of parent edges between the two organizations when
            one is an ancestor-or-self of the other, ``NOT_IN_SAME_BRANCH`` otherwise

        Raises:
            OrganizationManagementError: If the hierarchy cannot be queried
        """
        pass


# noinspection PyAbstractClass
class OrganizationResolverPluginBase(Plugin):
    """Base plugin for organization resolver."""
    PROVIDER_NAME: str = None

    def name(self) -> str:
        return f"{EXT_ORGANIZATION_RESOLVER}|{self.PROVIDER_NAME}"

    def extension_point_name(self, v: Variables) -> str:
        return EXT_ORGANIZATION_RESOLVER

    def is_enabled(self, v: Variables) -> bool:
        return enabled_option_pattern(self, v, ORGSWITCH_ORGANIZATION_RESOLVER, self_attr='PROVIDER_NAME')

    def on_registration(self, v: Variables) -> None:
        v.set_default_value(ORGSWITCH_ORGANIZATION_RESOLVER, DEFAULT_ORGSWITCH_ORGANIZATION_RESOLVER)
