"""
NoteVault Backend — Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Who:   Used by the note repository for CRUD and by Alembic for migrations.

Table Design:
    - owner_id: FK to users.id; every note belongs to exactly one user and is
      removed with it (ON DELETE CASCADE)
    - title: required, non-empty (enforced by request validation)
    - description: free text, empty string when omitted

    Index on owner_id:
        Every read is scoped to the owner (`WHERE owner_id = :uid`), so the
        listing query never scans other tenants' rows.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notevault.database import Base
from notevault.models.user import utcnow


class Note(Base):
    """
    A private note owned by a single user.

    Lifecycle:
        1. Created by its owner (POST /notes)
        2. Edited partially by its owner (PATCH /notes/{id})
        3. Deleted by its owner (DELETE /notes/{id})
    Other users can neither see nor change it.
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="User who created the note",
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    __table_args__ = (
        Index("idx_notes_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, owner_id={self.owner_id}, title='{self.title}')>"
