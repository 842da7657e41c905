"""
Basic-Auth gate for the demo service.

Responsibilities:
    - Recognize the "Basic " scheme prefix on a raw `Authorization` value
    - Decode the base64 payload into (identity, secret)
    - Reject empty identities or secrets explicitly
    - Compare both fields against the configured Credential

Design notes:
    - Evaluation is a pure function of (header value, credential); the gate
      object only binds the credential and adds logging.
    - Every client-input problem resolves to `Unauthorized`. Nothing here
      raises for malformed headers.
    - The empty-credential branch stays separate from the mismatch branch.
      A browser pointed at `identity@host` sends an empty secret, which is
      how a user forces it to forget remembered credentials.

LLM Prompt Example:
    "Explain how a browser turns `user:pass@host` into an Authorization header
    and why an empty password is the usual way to make it re-prompt."
"""

import base64
import hmac
import logging
from typing import Optional

from .credential import Credential
from .results import AuthResult, Authorized, Unauthorized, UnauthorizedReason

__all__ = ["SCHEME_PREFIX", "BasicAuthGate", "decode_basic_payload", "evaluate"]

SCHEME_PREFIX = "Basic "

log = logging.getLogger("basic_auth_demo.gate")


def decode_basic_payload(encoded: str) -> Optional[str]:
    """
    Decode the part of a Basic header after the scheme prefix.

    Args:
        encoded (str): Standard base64 text, e.g. "dG9tOjEyMzQ=". Missing
            trailing "=" padding is restored before decoding.

    Returns:
        Optional[str]: The decoded UTF-8 text, or None when the input is not
        valid base64 or does not decode to UTF-8.
    """
    try:
        # binascii.Error and UnicodeDecodeError are both ValueError subclasses
        padded = encoded + "=" * (-len(encoded) % 4)
        return base64.b64decode(padded, validate=True).decode("utf-8")
    except ValueError:
        return None


def _same(candidate: str, expected: str) -> bool:
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def evaluate(header_value: Optional[str], expected: Credential) -> AuthResult:
    """
    Evaluate a raw `Authorization` header value against the expected credential.

    Args:
        header_value (Optional[str]): Header value as received, or None if absent.
        expected (Credential): The one credential that is accepted.

    Returns:
        AuthResult: `Authorized(identity)` on an exact match, otherwise
        `Unauthorized(reason)`.

    Notes:
        - The scheme prefix is matched literally and case-sensitively.
        - The payload is split on the first ":" only; a missing ":" means an
          empty secret.
        - Identity and secret are compared exactly, without normalization.
    """
    if header_value is None:
        return Unauthorized(reason=UnauthorizedReason.MISSING_HEADER)
    if not header_value.startswith(SCHEME_PREFIX):
        return Unauthorized(reason=UnauthorizedReason.WRONG_SCHEME)

    decoded = decode_basic_payload(header_value[len(SCHEME_PREFIX):])
    if decoded is None:
        return Unauthorized(reason=UnauthorizedReason.MALFORMED)

    identity, _, secret = decoded.partition(":")
    if not identity or not secret:
        return Unauthorized(reason=UnauthorizedReason.EMPTY_CREDENTIAL)

    # Both comparisons always run
    identity_ok = _same(identity, expected.identity)
    secret_ok = _same(secret, expected.secret)
    if not (identity_ok and secret_ok):
        return Unauthorized(reason=UnauthorizedReason.MISMATCH)

    return Authorized(identity=identity)


class BasicAuthGate:
    """Binds the expected credential and evaluates headers against it."""

    def __init__(self, credential: Credential):
        """
        Args:
            credential (Credential): Immutable expected identity/secret pair.
        """
        self._credential = credential

    @property
    def identity(self) -> str:
        return self._credential.identity

    def evaluate(self, header_value: Optional[str]) -> AuthResult:
        """
        Evaluate one request's `Authorization` value.

        Returns:
            AuthResult: see `evaluate()`. The gate keeps no state between calls.
        """
        result = evaluate(header_value, self._credential)
        if isinstance(result, Unauthorized):
            log.info("Basic auth rejected: %s", result.reason.value)
        else:
            log.debug("Basic auth accepted for %r", result.identity)
        return result
