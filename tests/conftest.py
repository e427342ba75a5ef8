"""
Pytest configuration and fixtures for the organization switch grant tests.

Uses scitrera-app-framework dependency injection for service configuration.
Each test session gets an isolated Variables instance that does NOT pull from
environment variables - all configuration is set explicitly for test isolation.

Organization hierarchy used by framework-backed tests:

    root (root.example)
    ├── org-a (a.example)
    │   └── org-a1 (a1.example)
    │       └── org-a11
    └── org-b (b.example)
    other-root (other.example)
"""
import json
import logging
from unittest.mock import MagicMock

import pytest

from scitrera_app_framework import Variables, get_extension
from orgswitch_server.config import (
    ORGSWITCH_DATA_DIR,
    ORGSWITCH_ORGANIZATION_RESOLVER,
    ORGSWITCH_ORGANIZATIONS_FILE,
    ORGSWITCH_TOKEN_STORE,
)
from orgswitch_server.models import TokenBinding
from orgswitch_server.services.token_issuer import TokenIssuer
from orgswitch_server.services.token_store import AccessTokenStore
from orgswitch_server.services.token_validation import TokenValidator
from orgswitch_server.services.organization import OrganizationResolver
from tests.factories import ORGANIZATIONS


# -----------------------------------------------------------------------------
# Logging Configuration (initialized by test harness, not framework)
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def test_logger() -> logging.Logger:
    """
    Create a root logger for tests.

    The test harness owns logging configuration, not the framework.
    """
    logger = logging.getLogger("orgswitch-test")
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s %(funcName)s() > %(message)s',
            datefmt='%Y/%m/%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


# -----------------------------------------------------------------------------
# Framework Initialization with Test Isolation
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def organizations_file(tmp_path_factory):
    """JSON hierarchy document loaded by the in-memory organization resolver."""
    path = tmp_path_factory.mktemp("orgswitch_orgs") / "organizations.json"
    path.write_text(json.dumps({"organizations": [o.model_dump() for o in ORGANIZATIONS]}))
    return path


@pytest.fixture(scope="session")
def test_configuration(organizations_file):
    """
    Create an isolated Variables instance to provide custom configuration
    for tests. The test's local framework will be built on top of this configuration.
    """
    v = Variables()
    v.set(ORGSWITCH_TOKEN_STORE, "in-memory")
    v.set(ORGSWITCH_ORGANIZATION_RESOLVER, "in-memory")
    v.set(ORGSWITCH_ORGANIZATIONS_FILE, str(organizations_file))
    return v


@pytest.fixture(scope="session")
def test_framework(test_configuration, tmp_path_factory, test_logger):
    """
    Initialize an isolated framework instance for the test session.

    Yields:
        tuple: (v: Variables, services: module) for use in tests
    """
    from orgswitch_server.dependencies import preconfigure, initialize_services_sync

    tmp_dir = tmp_path_factory.mktemp("orgswitch_test")

    v = test_configuration
    v.set(ORGSWITCH_DATA_DIR, str(tmp_dir))

    # Initialize framework in test mode (no fault handler, no pyroscope, etc.)
    v, services = preconfigure(v=v, test_mode=True, test_logger=test_logger)
    v = initialize_services_sync(v)

    yield v, services


@pytest.fixture(scope="session")
def v(test_framework):
    """Isolated Variables instance for tests."""
    v, _ = test_framework
    return v


@pytest.fixture(scope='session')
def fastapi_app(test_framework):
    """FastAPI app instance for tests."""
    from orgswitch_server.lifecycle.fastapi import fastapi_app_factory
    v, _ = test_framework
    return fastapi_app_factory(v=v)


# -----------------------------------------------------------------------------
# Convenience Service Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def access_token_store(v) -> AccessTokenStore:
    """Get the access token store."""
    from orgswitch_server.services.token_store import EXT_ACCESS_TOKEN_STORE
    return get_extension(EXT_ACCESS_TOKEN_STORE, v)


@pytest.fixture
def organization_resolver(v) -> OrganizationResolver:
    """Get the organization resolver."""
    from orgswitch_server.services.organization import EXT_ORGANIZATION_RESOLVER
    return get_extension(EXT_ORGANIZATION_RESOLVER, v)


@pytest.fixture
def grant_registry(v):
    """Get the grant handler registry."""
    from orgswitch_server.services.grant import EXT_GRANT_HANDLER_REGISTRY
    return get_extension(EXT_GRANT_HANDLER_REGISTRY, v)


# -----------------------------------------------------------------------------
# Mock Collaborators (unit tests)
# -----------------------------------------------------------------------------

@pytest.fixture
def token_validator() -> MagicMock:
    return MagicMock(spec=TokenValidator)


@pytest.fixture
def token_store() -> MagicMock:
    return MagicMock(spec=AccessTokenStore)


@pytest.fixture
def resolver() -> MagicMock:
    return MagicMock(spec=OrganizationResolver)


@pytest.fixture
def token_issuer() -> MagicMock:
    return MagicMock(spec=TokenIssuer)


@pytest.fixture
def sample_binding() -> TokenBinding:
    return TokenBinding(binding_type="cookie", binding_reference="ref-123", binding_value="atbv-abc")
