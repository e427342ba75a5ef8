"""
Organization switch grant.

Exchanges a valid access token issued for one organization for a token scoped
to another organization in the same branch of the organization hierarchy,
without re-authenticating the user.

Request parameters:
- token: the access token being exchanged
- switching_organization: the organization to switch into
"""
import logging
from logging import Logger
from typing import Iterable, Optional

from scitrera_app_framework import get_logger
from scitrera_app_framework.api import Variables

from .base import AuthorizationGrantHandler, GrantHandlerPluginBase, extract_parameter
from .._constants import (
    EXT_ACCESS_TOKEN_STORE,
    EXT_ORGANIZATION_RESOLVER,
    EXT_TOKEN_ISSUER,
    EXT_TOKEN_VALIDATOR,
)
from ..organization import (
    OrganizationManagementError,
    OrganizationResolver,
    ERROR_CODE_ORGANIZATION_NOT_FOUND_FOR_TENANT,
)
from ..token_issuer import TokenIssuer
from ..token_store import AccessTokenStore
from ..token_validation import TokenValidator
from ...exceptions import (
    AlreadyIssuedForOrganizationError,
    CrossBranchSwitchError,
    InvalidGrantError,
    InvalidRequestError,
    OrganizationResolutionError,
)
from ...models.request import TokenRequestContext
from ...models.token import (
    TOKEN_TYPE_BEARER,
    AccessTokenResponse,
    TokenValidationContextParam,
    TokenValidationRequest,
    TokenValidationResult,
)
from ...models.user import AuthenticatedUser

GRANT_TYPE_ORGANIZATION_SWITCH = "organization_switch"

TOKEN_PARAM = "token"
ORG_PARAM = "switching_organization"


def build_switched_user(
        authorized_user: AuthenticatedUser,
        source_organization_id: str,
        switch_organization_id: str,
) -> AuthenticatedUser:
    """Copy ``authorized_user`` re-scoped to ``switch_organization_id``.

    The resident organization already recorded on the user is kept, so it does
    not drift over several switches; on the first switch it is anchored to the
    organization the token was issued in.
    """
    resident_organization = authorized_user.user_resident_organization or source_organization_id
    return authorized_user.model_copy(
        update={
            "accessing_organization": switch_organization_id,
            "user_resident_organization": resident_organization,
        },
        deep=True,
    )


def check_organization_is_allowed_to_switch(
        organization_resolver: OrganizationResolver,
        current_organization_id: str,
        switch_organization_id: str,
) -> int:
    """Enforce the switch policy between two organizations.

    Switching into the organization the token is already scoped to is rejected
    before the hierarchy is consulted; otherwise both organizations must be in
    the same branch, in either direction.

    Returns:
        Relative depth between the organizations

    Raises:
        AlreadyIssuedForOrganizationError: If both organizations are the same
        CrossBranchSwitchError: If the organizations are in different branches
        OrganizationResolutionError: If the hierarchy query fails
    """
    if current_organization_id == switch_organization_id:
        raise AlreadyIssuedForOrganizationError(switch_organization_id)

    try:
        depth = organization_resolver.get_relative_depth_between_organizations_in_same_branch(
            current_organization_id, switch_organization_id
        )
    except Exception as e:
        raise OrganizationResolutionError("Error while checking organizations allowed to switch.") from e

    if depth < 0:
        raise CrossBranchSwitchError(current_organization_id, switch_organization_id)
    return depth


class OrganizationSwitchGrantHandler(AuthorizationGrantHandler):
    """Grant handler for the ``organization_switch`` grant type."""

    GRANT_TYPE = GRANT_TYPE_ORGANIZATION_SWITCH

    def __init__(
            self,
            token_validator: TokenValidator,
            token_store: AccessTokenStore,
            organization_resolver: OrganizationResolver,
            token_issuer: TokenIssuer,
            logger: Optional[logging.Logger] = None,
    ):
        self.token_validator = token_validator
        self.token_store = token_store
        self.organization_resolver = organization_resolver
        self.token_issuer = token_issuer
        self.logger = logger or logging.getLogger(__name__)

    def validate_grant(self, context: TokenRequestContext) -> bool:
        parameters = context.request.request_parameters
        token = extract_parameter(parameters, TOKEN_PARAM)
        switch_organization_id = extract_parameter(parameters, ORG_PARAM)
        if not token:
            raise InvalidRequestError(f"Missing required parameter: {TOKEN_PARAM}", parameter=TOKEN_PARAM)
        if not switch_organization_id:
            raise InvalidRequestError(f"Missing required parameter: {ORG_PARAM}", parameter=ORG_PARAM)

        validation_result = self._validate_token(token)
        if not validation_result.valid:
            self.logger.debug("Access token validation failed.")
            raise InvalidGrantError("Invalid token received.")

        self.logger.debug("Access token validation success.")

        # the validator's assertion is the fallback when the store has no record for the token
        token_record = self.token_store.lookup(token)
        if token_record is not None:
            authorized_user = token_record.authorized_user
        elif validation_result.authorized_user:
            authorized_user = AuthenticatedUser.from_subject_identifier(validation_result.authorized_user)
        else:
            self.logger.debug("Token validated without an authorized user and no stored record.")
            raise InvalidGrantError("Invalid token received.")

        source_organization_id = self._get_organization_id_from_tenant_domain(authorized_user.tenant_domain)
        self._check_organization_is_allowed_to_switch(source_organization_id, switch_organization_id)

        switched_user = build_switched_user(authorized_user, source_organization_id, switch_organization_id)

        context.authorized_user = switched_user
        context.scope = list(context.request.scope)
        if token_record is not None and token_record.token_binding is not None:
            context.carried_token_binding = token_record.token_binding

        self.logger.debug(
            "Issuing an access token for user: %s with scopes: %s",
            switched_user, context.scope,
        )
        return True

    def issue(self, context: TokenRequestContext) -> AccessTokenResponse:
        if context.carried_token_binding is not None:
            context.token_binding = context.carried_token_binding
        return self.token_issuer.issue(context)

    def _validate_token(self, token: str) -> TokenValidationResult:
        request = TokenValidationRequest(
            token_identifier=token,
            token_type=TOKEN_TYPE_BEARER,
            context=[TokenValidationContextParam()],
        )
        return self.token_validator.validate(request)

    def _get_organization_id_from_tenant_domain(self, tenant_domain: str) -> str:
        try:
            return self.organization_resolver.resolve_organization_id(tenant_domain)
        except OrganizationManagementError as e:
            raise OrganizationResolutionError(
                "Organization not found for the tenant.",
                detail_code=e.code or ERROR_CODE_ORGANIZATION_NOT_FOUND_FOR_TENANT,
            ) from e

    def _check_organization_is_allowed_to_switch(self, current_organization_id: str,
                                                 switch_organization_id: str) -> None:
        try:
            check_organization_is_allowed_to_switch(
                self.organization_resolver, current_organization_id, switch_organization_id
            )
        except (AlreadyIssuedForOrganizationError, CrossBranchSwitchError) as e:
            self.logger.debug("%s (from: %s, to: %s)", e.message, current_organization_id, switch_organization_id)
            raise


class OrganizationSwitchGrantPlugin(GrantHandlerPluginBase):
    """Plugin to register the organization switch grant handler."""

    def initialize(self, v: Variables, logger: Logger) -> AuthorizationGrantHandler:
        return OrganizationSwitchGrantHandler(
            token_validator=self.get_extension(EXT_TOKEN_VALIDATOR, v),
            token_store=self.get_extension(EXT_ACCESS_TOKEN_STORE, v),
            organization_resolver=self.get_extension(EXT_ORGANIZATION_RESOLVER, v),
            token_issuer=self.get_extension(EXT_TOKEN_ISSUER, v),
            logger=get_logger(v, name=OrganizationSwitchGrantHandler.__name__),
        )

    def get_dependencies(self, v: Variables) -> Iterable[str]:
        return (EXT_TOKEN_VALIDATOR, EXT_ACCESS_TOKEN_STORE, EXT_ORGANIZATION_RESOLVER, EXT_TOKEN_ISSUER,)
