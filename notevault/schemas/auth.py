"""
NoteVault Backend — Auth & User Schemas
=======================================

What:  Pydantic models for the /auth and /users endpoints.
How:   Request models carry the field rules; the messages they raise are the
       ones returned to clients (see notevault/validation.py).
"""

from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator


def normalize_email(value: str) -> str:
    """Trim and validate an email address; raises ValueError with a client-facing message."""
    value = value.strip()
    if not value:
        raise ValueError("Email is not provided")
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError:
        raise ValueError("Email is not valid")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class AuthRequest(BaseModel):
    """Body of POST /auth/signup and POST /auth/signin."""

    email: str = Field(description="Account email address")
    password: str = Field(description="Plaintext password")

    @field_validator("email")
    @classmethod
    def validate_email_field(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is not provided")
        return v


class EditUserRequest(BaseModel):
    """
    Body of PATCH /users. Every field is optional; only the fields present
    in the request are changed.
    """

    email: Optional[str] = Field(default=None, description="New email address")
    firstname: Optional[str] = Field(default=None, max_length=255)
    lastname: Optional[str] = Field(default=None, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email_field(cls, v: Optional[str]) -> str:
        # Present-but-null would clear a NOT NULL column
        if v is None:
            raise ValueError("Email is not valid")
        return normalize_email(v)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class TokenResponse(BaseModel):
    """Returned by signup (201) and signin (200)."""

    token: str = Field(description="Signed JWT access token; send as 'Authorization: Bearer <token>'")


class UserResponse(BaseModel):
    """Public view of a user. The password hash is never included."""

    id: int
    email: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
