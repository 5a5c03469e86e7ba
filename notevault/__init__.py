"""
NoteVault Backend — Application Package
=======================================

What:  Multi-tenant note-taking API: users sign up, sign in and manage
       their own private notes.
Who:   Imported by uvicorn (`notevault.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, request validation
    ├─────────────────────────────────────┤
    │   Access Guard (dependencies.py)    │  ← bearer token → current user
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← auth, owner scoping
    ├─────────────────────────────────────┤
    │     Repositories (Record Store)     │  ← find_unique / create / update / delete
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Auth routes (/auth/*) bypass the guard; every other route except
    /health requires a valid bearer token.
"""

__version__ = "1.0.0"
