"""
NoteVault Backend — Note Service (Owner-Scoped CRUD)
====================================================

What:  CRUD operations on notes, always scoped to the authenticated owner.
How:   Reads through the NoteRepository and compares `note.owner_id` with the
       caller before returning or changing anything.
Who:   Called by the /notes route handlers with the id bound by the access guard.

Owner scoping rules:
    - list_notes() only ever queries the caller's notes
    - get_note() / edit_note() return None for a note that is missing OR
      owned by someone else; the two cases are indistinguishable to the caller
    - ids outside the key range are treated as missing
    - delete_note() only removes the caller's own notes and reports the same
      outcome to the route either way
"""

import logging
from typing import List, Optional

from notevault.models.note import Note
from notevault.repositories.base import NoteRepository
from notevault.schemas.note import CreateNoteRequest, EditNoteRequest, NoteResponse

logger = logging.getLogger(__name__)

# Upper bound of the INTEGER primary key on PostgreSQL
MAX_NOTE_ID = 2**31 - 1


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): all notes of the owner, insertion order
        - get_note(): single note or None
        - create_note(): persist a validated note for the owner
        - edit_note(): partial update of title/description
        - delete_note(): remove if owned
    """

    def __init__(self, notes: NoteRepository):
        self._notes = notes

    async def list_notes(self, owner_id: int) -> List[NoteResponse]:
        notes = await self._notes.find_many(owner_id=owner_id)
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, owner_id: int, note_id: int) -> Optional[NoteResponse]:
        """Return the note if `owner_id` owns it, otherwise None (not an error)."""
        note = await self._find_owned(owner_id, note_id)
        if note is None:
            return None
        return NoteResponse.model_validate(note)

    async def create_note(self, owner_id: int, data: CreateNoteRequest) -> NoteResponse:
        note = await self._notes.create(
            owner_id=owner_id,
            title=data.title,
            description=data.description,
        )
        logger.info("Note %s created by user %s", note.id, owner_id)
        return NoteResponse.model_validate(note)

    async def edit_note(
        self,
        owner_id: int,
        note_id: int,
        patch: EditNoteRequest,
    ) -> Optional[NoteResponse]:
        """
        Apply the fields present in `patch` to an owned note.

        Returns the updated note, or None when the note is missing or belongs
        to another user. In the latter case nothing is written.
        """
        note = await self._find_owned(owner_id, note_id)
        if note is None:
            return None

        changes = patch.model_dump(exclude_unset=True)
        if changes:
            note = await self._notes.update(note_id, changes)
            if note is None:
                return None
            logger.info("Note %s edited by user %s (%s)", note_id, owner_id, ", ".join(sorted(changes)))
        return NoteResponse.model_validate(note)

    async def delete_note(self, owner_id: int, note_id: int) -> bool:
        """Delete an owned note. Returns whether anything was removed."""
        note = await self._find_owned(owner_id, note_id)
        if note is None:
            return False
        deleted = await self._notes.delete(note_id)
        if deleted:
            logger.info("Note %s deleted by user %s", note_id, owner_id)
        return deleted

    async def _find_owned(self, owner_id: int, note_id: int) -> Optional[Note]:
        if not 1 <= note_id <= MAX_NOTE_ID:
            return None
        note = await self._notes.find_unique(id=note_id)
        if note is None or note.owner_id != owner_id:
            return None
        return note
