"""
Basic-Auth gate: decode and check an `Authorization` header against one credential.
"""

from .credential import Credential
from .gate import BasicAuthGate, SCHEME_PREFIX, decode_basic_payload, evaluate
from .results import AuthResult, Authorized, Unauthorized, UnauthorizedReason

__all__ = [
    "AuthResult",
    "Authorized",
    "BasicAuthGate",
    "Credential",
    "SCHEME_PREFIX",
    "Unauthorized",
    "UnauthorizedReason",
    "decode_basic_payload",
    "evaluate",
]
