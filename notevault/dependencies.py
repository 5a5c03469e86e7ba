"""
NoteVault Backend — Dependency Wiring & Access Guard
====================================================

What:  Assembles repositories and services per request, and guards protected
       routes by turning a bearer token into the current User.
How:   FastAPI's Depends() graph. Everything that touches storage hangs off
       get_db_session, so one request shares one session. Tests replace
       get_user_repository / get_note_repository via app.dependency_overrides.

Access guard states:
    UNAUTHENTICATED ── valid token + existing user ──▶ AUTHENTICATED
          │                                              (user bound to request)
          └── missing / non-Bearer / invalid / expired token,
              or unknown subject ──▶ 401, request ends
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from notevault.database import get_db_session
from notevault.exceptions import AuthError
from notevault.models.user import User
from notevault.repositories.base import NoteRepository, UserRepository
from notevault.repositories.sql import SqlNoteRepository, SqlUserRepository
from notevault.services.auth_base import PasswordHasher, TokenIssuer
from notevault.services.auth_service import AuthService
from notevault.services.note_service import NoteService
from notevault.services.password_hasher import password_hasher
from notevault.services.token_service import INVALID_CREDENTIALS_MESSAGE, token_issuer
from notevault.services.user_service import UserService

# auto_error=False: a missing header is reported by the guard as 401
_bearer_scheme = HTTPBearer(auto_error=False)


# ── Collaborators ─────────────────────────────────────────────────────────
def get_user_repository(db: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return SqlUserRepository(db)


def get_note_repository(db: AsyncSession = Depends(get_db_session)) -> NoteRepository:
    return SqlNoteRepository(db)


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_token_issuer() -> TokenIssuer:
    return token_issuer


# ── Services ──────────────────────────────────────────────────────────────
def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(users=users, hasher=hasher, tokens=tokens)


def get_note_service(notes: NoteRepository = Depends(get_note_repository)) -> NoteService:
    return NoteService(notes=notes)


def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(users=users)


# ── Access Guard ──────────────────────────────────────────────────────────
async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    users: UserRepository = Depends(get_user_repository),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> User:
    """
    Resolve the caller from `Authorization: Bearer <token>`.

    Returns the User and records its id on `request.state.user_id`.

    Raises:
        AuthError (401) for every failure; the response carries
        `WWW-Authenticate: Bearer`.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError(INVALID_CREDENTIALS_MESSAGE, context={"reason": "missing_token"})

    claims = tokens.verify(credentials.credentials)

    user = await users.find_unique(id=claims.user_id)
    if user is None:
        raise AuthError(INVALID_CREDENTIALS_MESSAGE, context={"reason": "unknown_subject"})

    request.state.user_id = user.id
    return user
