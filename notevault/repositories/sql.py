"""
NoteVault Backend — SQLAlchemy Repositories
===========================================

What:  Async SQLAlchemy implementations of UserRepository and NoteRepository.
How:   Each repository wraps the request's AsyncSession. Writes are flushed
       (not committed) so the session dependency decides commit/rollback at
       the end of the request.
Who:   Built per request by notevault/dependencies.py.

Error translation:
    IntegrityError on users  → DuplicateRecordError(field="email")
    any other SQLAlchemyError → DatabaseError (details logged, not returned)
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notevault.exceptions import DatabaseError, DuplicateRecordError
from notevault.models.note import Note
from notevault.models.user import User
from notevault.repositories.base import NoteRepository, UserRepository

logger = logging.getLogger(__name__)


class SqlRepository:
    """Shared session handling and error translation."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _execute(self, statement, operation: str):
        try:
            return await self._session.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Database error during %s: %s", operation, str(e))
            raise DatabaseError(context={"operation": operation, "error_type": type(e).__name__})

    async def _flush(self, instance, operation: str, unique_field: Optional[str] = None) -> None:
        """Flush pending changes and reload server-side state into `instance`."""
        try:
            await self._session.flush()
            await self._session.refresh(instance)
        except IntegrityError as e:
            if unique_field is None:
                logger.error("Integrity error during %s: %s", operation, str(e))
                raise DatabaseError(context={"operation": operation, "error_type": "IntegrityError"})
            logger.info("Duplicate %s rejected during %s", unique_field, operation)
            raise DuplicateRecordError(field=unique_field, context={"operation": operation})
        except SQLAlchemyError as e:
            logger.error("Database error during %s: %s", operation, str(e))
            raise DatabaseError(context={"operation": operation, "error_type": type(e).__name__})


class SqlUserRepository(SqlRepository, UserRepository):
    """UserRepository backed by the `users` table."""

    async def find_unique(
        self,
        *,
        id: Optional[int] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        if (id is None) == (email is None):
            raise ValueError("find_unique requires exactly one of id or email")
        condition = User.id == id if id is not None else User.email == email
        result = await self._execute(select(User).where(condition), "find user")
        return result.scalar_one_or_none()

    async def create(self, *, email: str, password_hash: str) -> User:
        user = User(email=email, password_hash=password_hash)
        self._session.add(user)
        await self._flush(user, "create user", unique_field="email")
        return user

    async def update(self, user_id: int, changes: Dict[str, Any]) -> Optional[User]:
        user = await self.find_unique(id=user_id)
        if user is None:
            return None
        for key, value in changes.items():
            setattr(user, key, value)
        await self._flush(user, "update user", unique_field="email")
        return user


class SqlNoteRepository(SqlRepository, NoteRepository):
    """NoteRepository backed by the `notes` table."""

    async def find_many(self, *, owner_id: int) -> List[Note]:
        result = await self._execute(
            select(Note).where(Note.owner_id == owner_id).order_by(Note.id),
            "list notes",
        )
        return list(result.scalars().all())

    async def find_unique(self, *, id: int) -> Optional[Note]:
        result = await self._execute(select(Note).where(Note.id == id), "find note")
        return result.scalar_one_or_none()

    async def create(self, *, owner_id: int, title: str, description: str = "") -> Note:
        note = Note(owner_id=owner_id, title=title, description=description)
        self._session.add(note)
        await self._flush(note, "create note")
        return note

    async def update(self, note_id: int, changes: Dict[str, Any]) -> Optional[Note]:
        note = await self.find_unique(id=note_id)
        if note is None:
            return None
        for key, value in changes.items():
            setattr(note, key, value)
        await self._flush(note, "update note")
        return note

    async def delete(self, note_id: int) -> bool:
        note = await self.find_unique(id=note_id)
        if note is None:
            return False
        try:
            await self._session.delete(note)
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error during delete note: %s", str(e))
            raise DatabaseError(context={"operation": "delete note", "error_type": type(e).__name__})
        return True
