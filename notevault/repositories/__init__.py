"""
NoteVault Backend — Repositories Package
========================================

Record-store collaborators for the services layer:
    - base.py: UserRepository / NoteRepository interfaces
    - sql.py:  async SQLAlchemy implementations
"""
