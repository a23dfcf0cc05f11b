"""
TechNotes Backend: Application Package Initializer
===================================================

What: Marks the `technotes` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Uniqueness, ownership, hashing
    ├─────────────────────────────────────┤
    │     Repositories (Persistence)      │  ← One gateway per collection
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Sessions)          │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes translate HTTP bodies into typed request models, services apply
    the users/notes rules, repositories are the only code that touches the
    session.
"""

__version__ = "1.0.0"
