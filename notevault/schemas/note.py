"""
NoteVault Backend — Note Request/Response Schemas
=================================================

What:  Pydantic models defining the /notes API contract.
How:   Request models are validated explicitly through notevault/validation.py;
       response models are built from ORM rows with `from_attributes`.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _require_title(v: Optional[str]) -> str:
    if v is None or not v.strip():
        raise ValueError("Title is not provided")
    return v.strip()


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CreateNoteRequest(BaseModel):
    """Body of POST /notes."""

    title: str = Field(max_length=255, description="Note title (required, non-empty)")
    description: str = Field(default="", description="Note body")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _require_title(v)


class EditNoteRequest(BaseModel):
    """Body of PATCH /notes/{id}. Only the fields present are changed."""

    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> str:
        return _require_title(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> str:
        return v or ""


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Full representation of a note."""

    id: int = Field(description="Note identifier")
    owner_id: int = Field(description="Identifier of the owning user")
    title: str
    description: str
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last modification timestamp (UTC)")

    model_config = {"from_attributes": True}
