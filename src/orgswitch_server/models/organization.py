"""Organization hierarchy models."""
from typing import Optional

from pydantic import BaseModel, Field


class Organization(BaseModel):
    """A node in the organization hierarchy.

    Root organizations have no parent. An organization optionally owns a tenant
    domain; tokens issued in that tenant resolve to this organization.
    """

    model_config = {"frozen": True}

    id: str = Field(..., description="Organization ID")
    name: Optional[str] = Field(None, description="Display name")
    parent_id: Optional[str] = Field(None, description="Parent organization ID (None for roots)")
    tenant_domain: Optional[str] = Field(None, description="Tenant domain mapped to this organization")
