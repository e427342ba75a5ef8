"""Pytest fixtures for the organization switch grant integration tests.

These fixtures extend the base test fixtures from tests/conftest.py.
The `fastapi_app` fixture is inherited from the parent conftest and provides
a properly initialized FastAPI app using the test framework's Variables instance.
"""
import uuid
from typing import Callable, Generator, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from orgswitch_server.models import AuthenticatedUser, TokenBinding
from orgswitch_server.services.token_store import AccessTokenStore
from tests.factories import make_record, make_user


@pytest.fixture(scope="session")
def test_client(fastapi_app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create TestClient for FastAPI app.

    Uses the fastapi_app fixture from tests/conftest.py which provides
    a properly initialized app with test isolation.
    """
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def seed_token(access_token_store: AccessTokenStore) -> Callable[..., str]:
    """Store an access token for a user and return its value.

    Token values are unique per call since the store is shared by the session.
    """

    def _seed(user: Optional[AuthenticatedUser] = None, binding: Optional[TokenBinding] = None, **kwargs) -> str:
        token = f"seed_{uuid.uuid4().hex}"
        access_token_store.save(make_record(token, user or make_user(), token_binding=binding, **kwargs))
        return token

    return _seed
