"""OAuth2 error taxonomy for the grant server.

Client errors reject a grant and are surfaced with HTTP 400; server errors
are internal or collaborator failures surfaced with HTTP 500.
"""
from typing import Optional


class OAuth2Error(Exception):
    """Base exception for all token endpoint errors."""

    error_code: str = "server_error"
    status_code: int = 500

    def __init__(self, message: str, error_code: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        """RFC 6749 section 5.2 error body."""
        return {"error": self.error_code, "error_description": self.message}


class OAuth2ClientError(OAuth2Error):
    """The caller's request is invalid. Never retried by the server."""

    error_code = "invalid_request"
    status_code = 400


class OAuth2ServerError(OAuth2Error):
    """Internal or collaborator failure while handling a token request."""

    error_code = "server_error"
    status_code = 500


class InvalidRequestError(OAuth2ClientError):
    """A required request parameter is missing or malformed."""

    error_code = "invalid_request"

    def __init__(self, message: str = "Invalid token request.", parameter: Optional[str] = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class UnsupportedGrantTypeError(OAuth2ClientError):
    """No handler is registered for the requested grant type."""

    error_code = "unsupported_grant_type"

    def __init__(self, grant_type: Optional[str]) -> None:
        super().__init__(f"Unsupported grant type: {grant_type}")
        self.grant_type = grant_type


class InvalidGrantError(OAuth2ClientError):
    """The presented grant (token) is invalid, expired or revoked."""

    error_code = "invalid_grant"

    def __init__(self, message: str = "Invalid token received.") -> None:
        super().__init__(message)


class AlreadyIssuedForOrganizationError(InvalidGrantError):
    """The presented token is already scoped to the requested organization."""

    def __init__(self, organization_id: Optional[str] = None) -> None:
        super().__init__("Provided token was already issued for the requested organization.")
        self.organization_id = organization_id


class CrossBranchSwitchError(InvalidGrantError):
    """Source and target organizations are not in the same hierarchy branch."""

    def __init__(self, source_organization_id: Optional[str] = None,
                 target_organization_id: Optional[str] = None) -> None:
        super().__init__("Organization switch is only allowed for the organizations in the same branch.")
        self.source_organization_id = source_organization_id
        self.target_organization_id = target_organization_id


class OrganizationResolutionError(OAuth2ServerError):
    """Organization lookup failed. The resolver's error is chained as ``__cause__``."""

    def __init__(self, message: str, detail_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.detail_code = detail_code


__all__ = [
    "AlreadyIssuedForOrganizationError",
    "CrossBranchSwitchError",
    "InvalidGrantError",
    "InvalidRequestError",
    "OAuth2ClientError",
    "OAuth2Error",
    "OAuth2ServerError",
    "OrganizationResolutionError",
    "UnsupportedGrantTypeError",
]
