# Importing the models registers them on Base.metadata (create_all, Alembic)
from notevault.models.user import User
from notevault.models.note import Note

__all__ = ["User", "Note"]
