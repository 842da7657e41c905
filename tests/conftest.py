"""
Global pytest fixtures for the Basic-Auth demo test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide the demo Credential ("tom"/"1234") and a gate bound to it

Why an app factory?
    Using `create_app()` lets each test choose its own credential without
    touching the environment or module-level state.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from basic_auth_demo.gate import BasicAuthGate, Credential


@pytest.fixture
def credential() -> Credential:
    """The credential used throughout the end-to-end scenarios."""
    return Credential(identity="tom", secret="1234")


@pytest.fixture
def gate(credential: Credential) -> BasicAuthGate:
    return BasicAuthGate(credential)


@pytest.fixture
def client(credential: Credential) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - The protected path is pinned to "/api/data" so the tests do not
          depend on BASIC_AUTH_PROTECTED_PATH.
    """
    app = create_app(credential=credential, protected_path="/api/data")
    return TestClient(app)
