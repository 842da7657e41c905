"""
Utility functions for the auth module.
"""

import base64

from basic_auth_demo.gate import SCHEME_PREFIX


def build_basic_authorization(identity: str, secret: str) -> str:
    """
    Pre-compute an `Authorization` header value.

    The payload is UTF-8 encoded before base64, matching the demo page script
    and the gate's decoder.

    Example:
        >>> build_basic_authorization("tom", "1234")
        'Basic dG9tOjEyMzQ='
    """
    token = base64.b64encode(f"{identity}:{secret}".encode("utf-8")).decode("ascii")
    return f"{SCHEME_PREFIX}{token}"
