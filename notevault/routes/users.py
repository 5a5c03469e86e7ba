"""
NoteVault Backend — User Route Handlers
=======================================

What:  GET /users/me and PATCH /users for the authenticated caller.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from notevault.dependencies import get_current_user, get_user_service
from notevault.models.user import User
from notevault.schemas.auth import UserResponse
from notevault.schemas.common import ErrorResponse
from notevault.services.user_service import UserService
from notevault.validation import validate_edit_user

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
    summary="Get the current user",
)
async def get_me(
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    return await user_service.get_user(current_user.id)


@router.patch(
    "",
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid field values", "model": ErrorResponse},
        401: {"description": "Missing or invalid token", "model": ErrorResponse},
        403: {"description": "Email already exists", "model": ErrorResponse},
    },
    summary="Edit the current user's profile",
)
async def edit_me(
    payload: Any = Body(default=None),
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Partially update the caller's profile.

    Body (all optional): email, firstname, lastname
    """
    patch = validate_edit_user(payload).unwrap()
    return await user_service.edit_user(current_user.id, patch)
