"""
Core authentication logic.

This module turns a gate outcome into either the authenticated user name or
an HTTP 401 challenge. The challenge advertises the Basic scheme without a
realm; browsers never send the realm back, so it carries no information.
"""

from typing import Optional

from fastapi import HTTPException, status

from basic_auth_demo.gate import Authorized, BasicAuthGate

CHALLENGE_HEADERS = {"WWW-Authenticate": "Basic"}


def authenticate_header(gate: BasicAuthGate, authorization: Optional[str]) -> str:
    """
    Authenticate a request by its raw `Authorization` header.

    Args:
        gate (BasicAuthGate): Gate bound to the expected credential.
        authorization (Optional[str]): Header value, or None if the client sent none.

    Returns:
        str: The authenticated user name.

    Raises:
        HTTPException: 401 with `WWW-Authenticate: Basic` for any header that
            does not carry the expected credential.
    """
    result = gate.evaluate(authorization)
    if isinstance(result, Authorized):
        return result.identity

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=result.reason.value,
        headers=dict(CHALLENGE_HEADERS),
    )
