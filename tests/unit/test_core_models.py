"""Tests for core models and the OAuth2 error taxonomy."""
import pytest

from orgswitch_server.config import SUPER_TENANT_DOMAIN
from orgswitch_server.exceptions import (
    AlreadyIssuedForOrganizationError,
    CrossBranchSwitchError,
    InvalidGrantError,
    InvalidRequestError,
    OAuth2ClientError,
    OAuth2ServerError,
    OrganizationResolutionError,
    UnsupportedGrantTypeError,
)
from orgswitch_server.models import AuthenticatedUser
from tests.factories import make_context, make_record, make_user


class TestAuthenticatedUser:

    def test_from_qualified_subject(self):
        user = AuthenticatedUser.from_subject_identifier("alice@a.example")

        assert user.subject_identifier == "alice"
        assert user.tenant_domain == "a.example"
        assert user.accessing_organization is None

    def test_email_subject_splits_on_last_at(self):
        user = AuthenticatedUser.from_subject_identifier("alice@mail.com@a.example")

        assert user.subject_identifier == "alice@mail.com"
        assert user.tenant_domain == "a.example"

    @pytest.mark.parametrize("subject", ["alice", "alice@", "@a.example"])
    def test_unqualified_subject_is_super_tenant(self, subject):
        user = AuthenticatedUser.from_subject_identifier(subject)

        assert user.subject_identifier == subject
        assert user.tenant_domain == SUPER_TENANT_DOMAIN

    def test_subject_identifier_round_trip(self):
        user = make_user("bob", "b.example")

        assert str(user) == "bob@b.example"
        assert AuthenticatedUser.from_subject_identifier(user.to_subject_identifier()).subject_identifier == "bob"


class TestAccessTokenRecord:

    def test_defaults(self):
        record = make_record("tok-1", make_user())

        assert record.token_type == "bearer"
        assert record.expires_at is None
        assert record.is_active

    def test_revoked_is_inactive(self):
        assert not make_record("tok-1", make_user(), revoked=True).is_active


class TestTokenRequestContext:

    def test_grant_type_and_properties(self):
        context = make_context(grant_type="organization_switch")

        assert context.grant_type == "organization_switch"
        assert context.get_property("missing") is None
        context.set_property("switched", True)
        assert context.get_property("switched") is True


class TestErrors:

    @pytest.mark.parametrize("error, code", [
        (InvalidRequestError("missing", parameter="token"), "invalid_request"),
        (UnsupportedGrantTypeError("password"), "unsupported_grant_type"),
        (InvalidGrantError(), "invalid_grant"),
        (AlreadyIssuedForOrganizationError("org-a"), "invalid_grant"),
        (CrossBranchSwitchError("org-a", "org-b"), "invalid_grant"),
    ])
    def test_client_errors(self, error, code):
        assert isinstance(error, OAuth2ClientError)
        assert error.status_code == 400
        assert error.to_dict() == {"error": code, "error_description": error.message}

    def test_server_error(self):
        error = OrganizationResolutionError("Organization not found for the tenant.", detail_code="ORG-60001")

        assert isinstance(error, OAuth2ServerError)
        assert error.status_code == 500
        assert error.to_dict()["error"] == "server_error"
        assert error.detail_code == "ORG-60001"
