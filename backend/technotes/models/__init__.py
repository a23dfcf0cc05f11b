# Models package init
"""
TechNotes Backend: ORM Models
=============================

    - user.py: `users` table (unique username, bcrypt password hash, roles)
    - note.py: `notes` table (unique title, owner reference to users.id)

Both modules must be imported before `Base.metadata.create_all()` or Alembic
autogenerate can see their tables.
"""

from technotes.models.note import Note
from technotes.models.user import User

__all__ = ["Note", "User"]
