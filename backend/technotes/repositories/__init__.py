# Repositories package init
"""
TechNotes Backend: Persistence Gateways
=======================================

What:  One repository per collection, each bound to the request's AsyncSession.
Why:   Services never build queries themselves; they call find/create/save/delete
       on a repository and receive application exceptions instead of
       SQLAlchemy ones.

Repository Inventory:
    - Repository (base.py):    find_by_id, find_one, find_all, find_by_ids,
                               create, save, delete
    - UserRepository:          + find_by_username
    - NoteRepository:          + find_by_title, find_any_by_owner
"""

from technotes.repositories.base import Repository
from technotes.repositories.note_repository import NoteRepository
from technotes.repositories.user_repository import UserRepository

__all__ = ["Repository", "NoteRepository", "UserRepository"]
