"""
Authenticated user model.

The same model describes the user asserted by an incoming token and the
re-scoped principal handed to the token issuer after an organization switch.
"""
from typing import Optional

from pydantic import BaseModel, Field

from ..config import SUPER_TENANT_DOMAIN


class AuthenticatedUser(BaseModel):
    """User identity bound to an access token."""

    model_config = {"from_attributes": True}

    # Identity
    subject_identifier: str = Field(..., description="Subject (sub) the token was issued for")
    tenant_domain: str = Field(..., description="Tenant the original token was issued in")
    user_id: Optional[str] = Field(None, description="Internal user ID, when known")
    user_name: Optional[str] = Field(None, description="Username, when known")
    federated: bool = Field(False, description="Whether the user authenticated through a federated IdP")

    # Organization scoping
    user_resident_organization: Optional[str] = Field(
        None,
        description="Organization the user's identity natively lives in"
    )
    accessing_organization: Optional[str] = Field(
        None,
        description="Organization the token is currently scoped to"
    )

    @classmethod
    def from_subject_identifier(cls, subject_identifier: str) -> "AuthenticatedUser":
        """Build a local user from a tenant-qualified subject identifier.

        ``alice@acme.com`` resolves to subject ``alice`` in tenant ``acme.com``;
        an unqualified subject belongs to the super tenant.
        """
        subject, sep, tenant_domain = subject_identifier.rpartition("@")
        if not sep or not subject or not tenant_domain:
            return cls(
                subject_identifier=subject_identifier,
                tenant_domain=SUPER_TENANT_DOMAIN,
                user_name=subject_identifier,
            )
        return cls(
            subject_identifier=subject,
            tenant_domain=tenant_domain,
            user_name=subject,
        )

    def to_subject_identifier(self) -> str:
        """Tenant-qualified subject identifier (inverse of ``from_subject_identifier``)."""
        return f"{self.subject_identifier}@{self.tenant_domain}"

    def __str__(self) -> str:
        return self.to_subject_identifier()
