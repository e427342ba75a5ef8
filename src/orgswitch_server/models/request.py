"""
Token request models.

These models carry a token endpoint request through grant validation and
issuance.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, Field

from .token import TokenBinding
from .user import AuthenticatedUser


class RequestParameter(BaseModel):
    """A raw request parameter; a key may carry several values."""

    key: str
    value: list[str] = Field(default_factory=list)


class AccessTokenRequest(BaseModel):
    """Parsed token endpoint request."""

    grant_type: str = Field(..., description="OAuth2 grant type identifier")
    client_id: Optional[str] = Field(None, description="Requesting client")
    scope: list[str] = Field(default_factory=list, description="Requested scopes, in request order")
    request_parameters: list[RequestParameter] = Field(
        default_factory=list,
        description="All request parameters, including grant specific ones"
    )


@dataclass
class TokenRequestContext:
    """
    Mutable per-request issuance context.

    This is the contract between a grant handler and the token issuer. A grant
    handler populates it during validation; the issuer reads it to mint the
    token. One context belongs to exactly one request.
    """
    request: AccessTokenRequest
    authorized_user: Optional[AuthenticatedUser] = None
    scope: list[str] = field(default_factory=list)
    token_binding: Optional[TokenBinding] = None
    # binding taken over from the presented token, attached just before issuance
    carried_token_binding: Optional[TokenBinding] = None
    validity_period: Optional[int] = None
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def grant_type(self) -> str:
        return self.request.grant_type

    def get_property(self, key: str) -> Any:
        return self.properties.get(key)

    def set_property(self, key: str, value: Any) -> None:
        self.properties[key] = value
