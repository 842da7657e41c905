"""
FastAPI dependency functions for authentication.

These can be used in routes with Depends() to protect endpoints.
"""

from typing import Optional

from fastapi import Header, Request

from .service import authenticate_header


def get_gate(request: Request):
    """Return the gate the app factory stored on the application."""
    return request.app.state.gate


def get_current_user(request: Request, authorization: Optional[str] = Header(None)) -> str:
    """
    Dependency that retrieves and validates the current user.

    Args:
        request (Request): Incoming request; used to reach the app's gate.
        authorization (Optional[str]): Raw `Authorization` header, if any.

    Returns:
        str: The authenticated username.
    """
    return authenticate_header(get_gate(request), authorization)
