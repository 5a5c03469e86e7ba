"""
NoteVault Backend — bcrypt Password Hasher
==========================================

What:  Credential hasher used for sign-up, sign-in and nothing else.
How:   bcrypt with a per-hash random salt; the work factor comes from
       BCRYPT_ROUNDS (default 12).

bcrypt only reads the first 72 bytes of its input. Passwords are truncated
to that length explicitly, identically on hash and verify, so long
passwords behave the same across bcrypt releases.
"""

import logging

import bcrypt

from notevault.config import settings
from notevault.services.auth_base import PasswordHasher

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt-backed PasswordHasher."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("ascii"))
        except (ValueError, TypeError, UnicodeEncodeError):
            logger.warning("Stored password hash could not be parsed")
            return False


# ── Singleton Instance ────────────────────────────────────────────────────
password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
