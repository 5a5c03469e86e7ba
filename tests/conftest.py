"""
NoteVault Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Inventory:
    ├── user_repo / note_repo: in-memory repositories (no database needed)
    ├── hasher / tokens: real bcrypt hasher (low work factor) and JWT issuer
    ├── auth_service / note_service / user_service: services wired to the above
    ├── mock_db_session: AsyncMock session for error-translation tests
    ├── sqlite_session: real AsyncSession on in-memory SQLite
    └── test_client: HTTPX AsyncClient with repositories overridden
"""

import os

# Override settings for testing BEFORE any notevault imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_TOKEN_SECRET"] = "test-secret-not-for-production-use-0123456789"
os.environ["JWT_TOKEN_LIFE"] = "15m"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from notevault.database import Base
from notevault.exceptions import DuplicateRecordError
from notevault.models.note import Note
from notevault.models.user import User
from notevault.repositories.base import NoteRepository, UserRepository
from notevault.services.auth_service import AuthService
from notevault.services.note_service import NoteService
from notevault.services.password_hasher import BcryptPasswordHasher
from notevault.services.token_service import JWTTokenIssuer
from notevault.services.user_service import UserService

TEST_SECRET = "unit-test-secret-0123456789abcdef"


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Repositories
# ══════════════════════════════════════════════════════════════════════════


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryUserRepository(UserRepository):
    """UserRepository over a dict; enforces email uniqueness like the DB constraint."""

    def __init__(self):
        self.users: Dict[int, User] = {}
        self._next_id = 1

    async def find_unique(self, *, id: Optional[int] = None, email: Optional[str] = None) -> Optional[User]:
        if id is not None:
            return self.users.get(id)
        return next((u for u in self.users.values() if u.email == email), None)

    async def create(self, *, email: str, password_hash: str) -> User:
        if any(u.email == email for u in self.users.values()):
            raise DuplicateRecordError(field="email")
        now = _now()
        user = User(
            id=self._next_id,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        self._next_id += 1
        return user

    async def update(self, user_id: int, changes: Dict[str, Any]) -> Optional[User]:
        user = self.users.get(user_id)
        if user is None:
            return None
        new_email = changes.get("email")
        if new_email and any(u.email == new_email and u.id != user_id for u in self.users.values()):
            raise DuplicateRecordError(field="email")
        for key, value in changes.items():
            setattr(user, key, value)
        user.updated_at = _now()
        return user


class InMemoryNoteRepository(NoteRepository):
    """NoteRepository over a dict keyed by note id."""

    def __init__(self):
        self.notes: Dict[int, Note] = {}
        self._next_id = 1

    async def find_many(self, *, owner_id: int) -> List[Note]:
        return [n for n in self.notes.values() if n.owner_id == owner_id]

    async def find_unique(self, *, id: int) -> Optional[Note]:
        return self.notes.get(id)

    async def create(self, *, owner_id: int, title: str, description: str = "") -> Note:
        now = _now()
        note = Note(
            id=self._next_id,
            owner_id=owner_id,
            title=title,
            description=description,
            created_at=now,
            updated_at=now,
        )
        self.notes[note.id] = note
        self._next_id += 1
        return note

    async def update(self, note_id: int, changes: Dict[str, Any]) -> Optional[Note]:
        note = self.notes.get(note_id)
        if note is None:
            return None
        for key, value in changes.items():
            setattr(note, key, value)
        note.updated_at = _now()
        return note

    async def delete(self, note_id: int) -> bool:
        return self.notes.pop(note_id, None) is not None


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def note_repo():
    return InMemoryNoteRepository()


@pytest.fixture
def hasher():
    """bcrypt at the minimum work factor keeps the suite fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return JWTTokenIssuer(secret=TEST_SECRET, lifetime_seconds=900)


@pytest.fixture
def auth_service(user_repo, hasher, tokens):
    return AuthService(users=user_repo, hasher=hasher, tokens=tokens)


@pytest.fixture
def note_service(note_repo):
    return NoteService(notes=note_repo)


@pytest.fixture
def user_service(user_repo):
    return UserService(users=user_repo)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError(...)
        await SqlNoteRepository(mock_db_session).find_many(owner_id=1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def sqlite_session():
    """A real AsyncSession on a private in-memory SQLite database."""
    engine = create_async_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(user_repo, note_repo, hasher, tokens):
    """
    Provides an async HTTP test client for endpoint testing.

    The SQL repositories are swapped for the in-memory ones, so requests
    never touch a database; the same repo fixtures can be inspected by tests.
    Tokens are issued and checked by the `tokens` fixture.
    """
    from notevault.dependencies import (
        get_note_repository,
        get_password_hasher,
        get_token_issuer,
        get_user_repository,
    )
    from notevault.main import app

    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_note_repository] = lambda: note_repo
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_token_issuer] = lambda: tokens
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
