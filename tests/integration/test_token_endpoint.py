"""
Integration tests for the token endpoint with the organization switch grant.

Tokens are seeded into the in-memory store; the hierarchy comes from the
session organizations file (see tests/conftest.py).
"""
from fastapi.testclient import TestClient

from tests.factories import make_user

GRANT = "organization_switch"


def _switch(client: TestClient, token: str, organization: str, scope: str = "openid profile", **extra):
    data = {
        "grant_type": GRANT,
        "client_id": "client_1",
        "token": token,
        "switching_organization": organization,
        "scope": scope,
    }
    data.update(extra)
    return client.post("/oauth2/token", data=data)


class TestSuccessfulSwitch:

    def test_switch_to_child_organization(self, test_client, seed_token, access_token_store, sample_binding):
        token = seed_token(make_user("alice", "a.example"), binding=sample_binding)

        response = _switch(test_client, token, "org-a1")

        assert response.status_code == 200
        assert response.headers["cache-control"] == "no-store"
        data = response.json()
        assert data["token_type"] == "Bearer"
        assert data["scope"] == "openid profile"
        assert data["expires_in"] > 0

        record = access_token_store.lookup(data["access_token"])
        assert record.grant_type == GRANT
        assert record.scope == ["openid", "profile"]
        assert record.token_binding == sample_binding
        assert record.authorized_user.subject_identifier == "alice"
        assert record.authorized_user.accessing_organization == "org-a1"
        assert record.authorized_user.user_resident_organization == "org-a"

    def test_switch_to_parent_organization(self, test_client, seed_token, access_token_store):
        token = seed_token(make_user("erin", "a1.example"))

        response = _switch(test_client, token, "root", scope="openid")

        assert response.status_code == 200
        record = access_token_store.lookup(response.json()["access_token"])
        assert record.authorized_user.accessing_organization == "root"
        assert record.authorized_user.user_resident_organization == "org-a1"
        assert record.token_binding is None

    def test_switched_token_can_switch_again(self, test_client, seed_token, access_token_store):
        token = seed_token(make_user("alice", "a.example"))
        first = _switch(test_client, token, "org-a1").json()["access_token"]

        response = _switch(test_client, first, "root")

        assert response.status_code == 200
        user = access_token_store.lookup(response.json()["access_token"]).authorized_user
        assert user.accessing_organization == "root"
        assert user.user_resident_organization == "org-a"

    def test_empty_scope_is_omitted(self, test_client, seed_token):
        token = seed_token()

        response = _switch(test_client, token, "org-a11", scope="")

        assert response.status_code == 200
        assert "scope" not in response.json()


class TestRejectedSwitch:

    def test_same_organization(self, test_client, seed_token):
        token = seed_token(make_user("alice", "a.example"))

        response = _switch(test_client, token, "org-a")

        assert response.status_code == 400
        assert response.json() == {
            "error": "invalid_grant",
            "error_description": "Provided token was already issued for the requested organization.",
        }

    def test_sibling_organization(self, test_client, seed_token):
        token = seed_token(make_user("alice", "a.example"))

        response = _switch(test_client, token, "org-b")

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_grant"
        assert "same branch" in response.json()["error_description"]

    def test_other_root(self, test_client, seed_token):
        token = seed_token(make_user("alice", "a.example"))

        response = _switch(test_client, token, "other-root")

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_grant"

    def test_unknown_token(self, test_client):
        response = _switch(test_client, "not-a-token", "org-a1")

        assert response.status_code == 400
        assert response.json() == {"error": "invalid_grant", "error_description": "Invalid token received."}

    def test_revoked_token(self, test_client, seed_token, access_token_store):
        token = seed_token()
        access_token_store.revoke(token)

        response = _switch(test_client, token, "org-a1")

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_grant"

    def test_missing_switching_organization(self, test_client, seed_token):
        response = test_client.post("/oauth2/token", data={"grant_type": GRANT, "token": seed_token()})

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_request"

    def test_missing_token(self, test_client):
        response = test_client.post(
            "/oauth2/token", data={"grant_type": GRANT, "switching_organization": "org-a1"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_request"

    def test_unsupported_grant_type(self, test_client, seed_token):
        response = _switch(test_client, seed_token(), "org-a1", grant_type="password")

        assert response.status_code == 400
        assert response.json()["error"] == "unsupported_grant_type"

    def test_file_upload_for_client_id(self, test_client, seed_token):
        response = test_client.post(
            "/oauth2/token",
            data={"grant_type": GRANT, "token": seed_token(), "switching_organization": "org-a1"},
            files={"client_id": ("client.txt", b"client_1")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_request"
        assert "client_id" in response.json()["error_description"]
        assert response.headers["cache-control"] == "no-store"

    def test_tenant_without_organization(self, test_client, seed_token):
        token = seed_token(make_user("mallory", "unmapped.example"))

        response = _switch(test_client, token, "org-a1")

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"
        assert response.headers["cache-control"] == "no-store"
