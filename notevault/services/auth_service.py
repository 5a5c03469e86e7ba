"""
NoteVault Backend — Auth Service
================================

What:  Sign-up and sign-in orchestration.
How:   Composes a UserRepository, a PasswordHasher and a TokenIssuer, all
       passed to the constructor.
Who:   Called by the /auth route handlers.

Sign-up:
    hash password → create user → issue token
    Duplicate email (store unique constraint) → ConflictError (403).
    Every other failure propagates unchanged.

Sign-in:
    find user by email → verify hash → issue token
    Unknown email and wrong password produce the same AuthError (403) with
    the same message. A dummy hash is verified for unknown emails so both
    paths cost one bcrypt check. The dummy hash is computed once per hasher
    and shared by every AuthService built on it.
"""

import logging
from functools import lru_cache

from starlette.concurrency import run_in_threadpool

from notevault.exceptions import AuthError, ConflictError, DuplicateRecordError
from notevault.repositories.base import UserRepository
from notevault.schemas.auth import TokenResponse
from notevault.services.auth_base import PasswordHasher, TokenIssuer

logger = logging.getLogger(__name__)

INCORRECT_CREDENTIALS_MESSAGE = "Incorrect email or password"
EMAIL_EXISTS_MESSAGE = "Email already exists"

DUMMY_PASSWORD = "notevault-dummy-password"


@lru_cache(maxsize=8)
def dummy_hash_for(hasher: PasswordHasher) -> str:
    """Hash of DUMMY_PASSWORD, computed once per hasher instance."""
    return hasher.hash(DUMMY_PASSWORD)


class AuthService:
    """
    Authentication use cases.

    Args:
        users: record store for User rows
        hasher: one-way password hasher
        tokens: access token issuer
    """

    def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens: TokenIssuer):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def sign_up(self, email: str, password: str) -> TokenResponse:
        """
        Register a new user and return an access token.

        Raises:
            ConflictError: the email already belongs to a user
            DatabaseError: any other storage failure
        """
        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await run_in_threadpool(self._hasher.hash, password)

        try:
            user = await self._users.create(email=email, password_hash=password_hash)
        except DuplicateRecordError as e:
            logger.info("Sign-up rejected: email already registered")
            raise ConflictError(EMAIL_EXISTS_MESSAGE, field="email") from e

        logger.info("User %s signed up", user.id)
        return self.issue_token(user.id, user.email)

    async def sign_in(self, email: str, password: str) -> TokenResponse:
        """
        Verify credentials and return an access token.

        Raises:
            AuthError (403): unknown email or wrong password, same message for both
        """
        user = await self._users.find_unique(email=email)

        if user is None:
            dummy_hash = await run_in_threadpool(dummy_hash_for, self._hasher)
            await run_in_threadpool(self._hasher.verify, password, dummy_hash)
            matches = False
        else:
            matches = await run_in_threadpool(self._hasher.verify, password, user.password_hash)

        if not matches:
            logger.warning("Failed sign-in attempt")
            raise AuthError(INCORRECT_CREDENTIALS_MESSAGE, status_code=403)

        logger.info("User %s signed in", user.id)
        return self.issue_token(user.id, user.email)

    def issue_token(self, user_id: int, email: str) -> TokenResponse:
        """Build a signed token valid for the configured lifetime."""
        return TokenResponse(token=self._tokens.issue(user_id, email))
