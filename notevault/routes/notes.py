"""
NoteVault Backend — Notes Route Handlers
========================================

What:  Owner-scoped CRUD under /notes.
How:   Every handler depends on the access guard; the bound user's id is the
       only owner id ever passed to NoteService.

Responses:
    GET    /notes        → 200 [note, ...]
    GET    /notes/{id}   → 200 note, or 200 null when missing / not owned
    POST   /notes        → 201 note
    PATCH  /notes/{id}   → 200 note, or 200 null when missing / not owned
    DELETE /notes/{id}   → 200 {"message": "Note deleted"} in every case
    An id outside 1..2**31-1 is rejected with 400.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Path, status

from notevault.dependencies import get_current_user, get_note_service
from notevault.models.user import User
from notevault.schemas.common import ErrorResponse, MessageResponse
from notevault.schemas.note import NoteResponse
from notevault.services.note_service import MAX_NOTE_ID, NoteService
from notevault.validation import validate_create_note, validate_edit_note

router = APIRouter(
    prefix="/notes",
    tags=["Notes"],
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
)


@router.get("", response_model=List[NoteResponse], summary="List the caller's notes")
async def list_notes(
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return await note_service.list_notes(current_user.id)


@router.get(
    "/{note_id}",
    response_model=Optional[NoteResponse],
    summary="Get a note by ID",
)
async def get_note(
    note_id: int = Path(ge=1, le=MAX_NOTE_ID, description="Note identifier"),
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
) -> Optional[NoteResponse]:
    """Returns null (not 404) when the note does not exist or is not the caller's."""
    return await note_service.get_note(current_user.id, note_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteResponse,
    responses={400: {"description": "Title missing or invalid", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: Any = Body(default=None),
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    data = validate_create_note(payload).unwrap()
    return await note_service.create_note(current_user.id, data)


@router.patch(
    "/{note_id}",
    response_model=Optional[NoteResponse],
    responses={400: {"description": "Invalid field values", "model": ErrorResponse}},
    summary="Edit a note",
)
async def edit_note(
    note_id: int = Path(ge=1, le=MAX_NOTE_ID, description="Note identifier"),
    payload: Any = Body(default=None),
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
) -> Optional[NoteResponse]:
    patch = validate_edit_note(payload).unwrap()
    return await note_service.edit_note(current_user.id, note_id, patch)


@router.delete("/{note_id}", response_model=MessageResponse, summary="Delete a note")
async def delete_note(
    note_id: int = Path(ge=1, le=MAX_NOTE_ID, description="Note identifier"),
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
) -> MessageResponse:
    await note_service.delete_note(current_user.id, note_id)
    return MessageResponse(message="Note deleted")
