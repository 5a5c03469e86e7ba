"""
NoteVault Backend — Auth Route Handlers
=======================================

What:  POST /auth/signup and POST /auth/signin.
How:   Validate the body explicitly, then delegate to AuthService.
       These routes are public; they do not pass through the access guard.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from notevault.dependencies import get_auth_service
from notevault.schemas.auth import TokenResponse
from notevault.schemas.common import ErrorResponse
from notevault.services.auth_service import AuthService
from notevault.validation import validate_auth

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=TokenResponse,
    responses={
        201: {"description": "User created", "model": TokenResponse},
        400: {"description": "Invalid email or password", "model": ErrorResponse},
        403: {"description": "Email already exists", "model": ErrorResponse},
    },
    summary="Register a new user",
)
async def signup(
    payload: Any = Body(default=None),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Register a new user and return an access token.

    Body:
        email: valid email address
        password: plaintext password
    """
    body = validate_auth(payload).unwrap()
    return await auth_service.sign_up(body.email, body.password)


@router.post(
    "/signin",
    status_code=status.HTTP_200_OK,
    response_model=TokenResponse,
    responses={
        200: {"description": "Signed in", "model": TokenResponse},
        400: {"description": "Invalid email or password format", "model": ErrorResponse},
        403: {"description": "Incorrect email or password", "model": ErrorResponse},
    },
    summary="Sign in and obtain an access token",
)
async def signin(
    payload: Any = Body(default=None),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    body = validate_auth(payload).unwrap()
    return await auth_service.sign_in(body.email, body.password)
