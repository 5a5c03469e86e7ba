"""
NoteVault Backend — Credential & Token Interfaces
=================================================

What:  Abstract contracts for the two security primitives the auth layer
       depends on: a one-way password hasher and a token issuer.
How:   AuthService and the access guard receive implementations through
       their constructors; tests substitute lightweight fakes.

Implementations:
    - BcryptPasswordHasher (services/password_hasher.py)
    - JWTTokenIssuer       (services/token_service.py)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    user_id: int
    email: str
    expires_at: datetime


class PasswordHasher(ABC):
    """One-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of `password` suitable for storage."""
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check `password` against a stored hash.

        Returns False (never raises) for a mismatch or an unreadable hash.
        """
        ...


class TokenIssuer(ABC):
    """
    Mints and verifies signed, time-bounded identity tokens.

    Contract:
        - issue() embeds the subject (user id) and email with an expiry
        - verify() returns the claims or raises AuthError (401) for any
          malformed, tampered or expired token
        - tokens are not stored server-side
    """

    @abstractmethod
    def issue(self, user_id: int, email: str) -> str:
        ...

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        ...
