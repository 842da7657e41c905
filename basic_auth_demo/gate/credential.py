"""
The single identity/secret pair the gate accepts.

A Credential is built once at process start (see `auth.config.load_credential`)
and handed to the gate. It is frozen, so it can be shared across concurrently
evaluated requests without locking.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["Credential"]


class Credential(BaseModel):
    """Expected identity and secret, both compared byte for byte."""

    model_config = ConfigDict(frozen=True)

    identity: str = Field(min_length=1)
    secret: str = Field(min_length=1, repr=False)

    @field_validator("identity")
    @classmethod
    def _identity_has_no_colon(cls, value: str) -> str:
        # The decoded payload is split on the first ":", so such an identity could never match
        if ":" in value:
            raise ValueError("identity must not contain ':'")
        return value
