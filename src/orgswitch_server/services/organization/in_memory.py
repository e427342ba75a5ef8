"""In-memory organization hierarchy."""
import json
from logging import Logger
from pathlib import Path
from typing import Iterable, Optional

from scitrera_app_framework import get_logger
from scitrera_app_framework.api import Variables

from .base import (
    OrganizationResolver,
    OrganizationResolverPluginBase,
    OrganizationManagementError,
    OrganizationNotFoundError,
    ERROR_CODE_INVALID_ORGANIZATION_HIERARCHY,
    NOT_IN_SAME_BRANCH,
)
from ...config import ORGSWITCH_ORGANIZATIONS_FILE
from ...models.organization import Organization


def load_organizations(path: str | Path) -> list[Organization]:
    """Load an organization hierarchy from a JSON document.

    The document is either a list of organizations or an object with an
    ``organizations`` list. Each entry has ``id`` and optionally ``name``,
    ``parent_id`` and ``tenant_domain``.
    """
    with open(path, 'r') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get('organizations', [])
    return [Organization.model_validate(entry) for entry in data]


class InMemoryOrganizationResolver(OrganizationResolver):
    """
    Organization resolver over an in-memory forest of organizations.

    Each organization points at its parent; depth queries walk parent links.
    """

    def __init__(self, organizations: Iterable[Organization] = (), v: Variables = None):
        self._organizations: dict[str, Organization] = {}
        self._tenant_index: dict[str, str] = {}
        self.logger = get_logger(v, name=self.__class__.__name__)

        for organization in organizations:
            self.add_organization(organization)

        self.logger.info("Initialized OrganizationResolver with %d organizations", len(self._organizations))

    def add_organization(self, organization: Organization) -> Organization:
        """Add or replace an organization (parents may be added later)."""
        previous = self._organizations.get(organization.id)
        if previous is not None and previous.tenant_domain:
            self._tenant_index.pop(previous.tenant_domain, None)

        self._organizations[organization.id] = organization
        if organization.tenant_domain:
            self._tenant_index[organization.tenant_domain] = organization.id
        return organization

    def get_organization(self, organization_id: str) -> Optional[Organization]:
        return self._organizations.get(organization_id)

    def resolve_organization_id(self, tenant_domain: str) -> str:
        organization_id = self._tenant_index.get(tenant_domain)
        if organization_id is None:
            raise OrganizationNotFoundError(tenant_domain)
        return organization_id

    def get_relative_depth_between_organizations_in_same_branch(
            self,
            first_organization_id: str,
            second_organization_id: str,
    ) -> int:
        # second below first
        depth = self._depth_below(ancestor_id=first_organization_id, descendant_id=second_organization_id)
        if depth != NOT_IN_SAME_BRANCH:
            return depth
        # first below second
        return self._depth_below(ancestor_id=second_organization_id, descendant_id=first_organization_id)

    def _depth_below(self, ancestor_id: str, descendant_id: str) -> int:
        """Parent edges from descendant up to ancestor, or NOT_IN_SAME_BRANCH."""
        if ancestor_id not in self._organizations or descendant_id not in self._organizations:
            return NOT_IN_SAME_BRANCH

        depth = 0
        visited: set[str] = set()
        current: Optional[str] = descendant_id
        while current is not None:
            if current == ancestor_id:
                return depth
            if current in visited:
                raise OrganizationManagementError(
                    f"Cycle detected in organization hierarchy at: {current}",
                    code=ERROR_CODE_INVALID_ORGANIZATION_HIERARCHY,
                )
            visited.add(current)
            organization = self._organizations.get(current)
            current = organization.parent_id if organization else None
            depth += 1
        return NOT_IN_SAME_BRANCH


class InMemoryOrganizationResolverPlugin(OrganizationResolverPluginBase):
    """Plugin for the in-memory organization resolver."""
    PROVIDER_NAME = 'in-memory'

    def initialize(self, v: Variables, logger: Logger) -> OrganizationResolver:
        organizations: list[Organization] = []
        path = v.environ(ORGSWITCH_ORGANIZATIONS_FILE, default=None)
        if path:
            logger.info("Loading organization hierarchy from: %s", path)
            organizations = load_organizations(path)
        return InMemoryOrganizationResolver(organizations=organizations, v=v)
