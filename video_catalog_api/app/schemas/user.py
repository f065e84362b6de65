"""
Pydantic models for user data.

Users only carry a name and an e‑mail address.  The address format
is checked with the ``email-validator`` package, but the value is
stored exactly as the client sent it: no case folding, no display
name stripping.  Uniqueness is not enforced.
"""

from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator

from .common import ApiModel


class UserBase(ApiModel):
    name: str = Field(..., example="Ada Lovelace")
    email: str = Field(..., example="ada@example.com")

    @field_validator("email")
    @classmethod
    def check_email_format(cls, v: str) -> str:
        # ``test_environment`` lets ``*.test`` addresses through; display
        # names (``Ada <ada@example.com>``) are rejected by default.
        try:
            validate_email(v, check_deliverability=False, test_environment=True)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}") from e
        return v


class UserCreate(UserBase):
    """Schema for registering a user."""
    pass


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: UUID

    model_config = {
        "from_attributes": True,
    }
