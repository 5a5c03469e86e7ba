"""
NoteVault Backend — Repository Interfaces
=========================================

What:  Record-store contracts used by the services: find_unique, find_many,
       create, update, delete.
How:   Services depend only on these ABCs. The SQLAlchemy implementations
       live in repositories/sql.py; tests use in-memory implementations.

Contract shared by all repositories:
    - lookups return None (or an empty list) when nothing matches
    - a write that violates a unique constraint raises DuplicateRecordError
    - any other storage failure raises DatabaseError
    - ownership is NOT checked here; that rule belongs to the services
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from notevault.models.note import Note
from notevault.models.user import User


class UserRepository(ABC):
    """Store of User records, unique by id and by email."""

    @abstractmethod
    async def find_unique(
        self,
        *,
        id: Optional[int] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """Look up a user by exactly one of id or email."""
        ...

    @abstractmethod
    async def create(self, *, email: str, password_hash: str) -> User:
        """Persist a new user. Raises DuplicateRecordError if the email is taken."""
        ...

    @abstractmethod
    async def update(self, user_id: int, changes: Dict[str, Any]) -> Optional[User]:
        """
        Apply `changes` to the user and return it, or None if it does not exist.

        Raises DuplicateRecordError if `changes` sets an email already in use.
        """
        ...


class NoteRepository(ABC):
    """Store of Note records."""

    @abstractmethod
    async def find_many(self, *, owner_id: int) -> List[Note]:
        """All notes whose owner is `owner_id`, in insertion order."""
        ...

    @abstractmethod
    async def find_unique(self, *, id: int) -> Optional[Note]:
        ...

    @abstractmethod
    async def create(self, *, owner_id: int, title: str, description: str = "") -> Note:
        ...

    @abstractmethod
    async def update(self, note_id: int, changes: Dict[str, Any]) -> Optional[Note]:
        """Apply `changes` to the note and return it, or None if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, note_id: int) -> bool:
        """Remove the note. Returns False if there was nothing to delete."""
        ...
