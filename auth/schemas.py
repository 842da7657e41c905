"""
Pydantic schemas for response models in the auth module.
"""

from pydantic import BaseModel


class UserOut(BaseModel):
    """Body of a successful request to the protected endpoint."""
    userName: str
