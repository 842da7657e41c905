"""
Outcome types returned by the Basic-Auth gate.

An evaluation ends in exactly one of two states:
    - Authorized(identity): the header carried the configured credential
    - Unauthorized(reason): anything else

The reason tag is informational (logs, tests). Every Unauthorized outcome
maps to the same 401 challenge on the wire.

LLM Prompt Example:
    "Show how to model a tagged success/failure result with immutable
    pydantic models instead of raising exceptions for expected input."
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

__all__ = ["AuthResult", "Authorized", "Unauthorized", "UnauthorizedReason"]


class UnauthorizedReason(str, Enum):
    """Why a header did not authorize the request."""

    MISSING_HEADER = "missing_header"
    WRONG_SCHEME = "wrong_scheme"
    MALFORMED = "malformed"
    EMPTY_CREDENTIAL = "empty_credential"
    MISMATCH = "mismatch"


class Authorized(BaseModel):
    """The header matched the configured credential."""

    model_config = ConfigDict(frozen=True)

    identity: str


class Unauthorized(BaseModel):
    """The header was absent, malformed or did not match."""

    model_config = ConfigDict(frozen=True)

    reason: UnauthorizedReason


AuthResult = Union[Authorized, Unauthorized]
