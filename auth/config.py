"""
Configuration for the auth module.

The demo accepts exactly one user. Its name and password come from the
environment and are read when `load_credential()` is called, so tests can
monkeypatch them before building an app.

- BASIC_AUTH_USER_NAME : expected identity (default "tom")
- BASIC_AUTH_PASSWORD  : expected secret (default "1234")
"""

import os

from basic_auth_demo.gate.credential import Credential

DEFAULT_USER_NAME = "tom"
DEFAULT_PASSWORD = "1234"


def load_credential() -> Credential:
    """
    Build the expected Credential from the environment.

    Raises:
        pydantic.ValidationError: If the configured name or password is empty,
            or the name contains ':'.
    """
    return Credential(
        identity=os.getenv("BASIC_AUTH_USER_NAME", DEFAULT_USER_NAME),
        secret=os.getenv("BASIC_AUTH_PASSWORD", DEFAULT_PASSWORD),
    )
