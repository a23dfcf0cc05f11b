"""
TechNotes Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Unit fixtures (no database):
    ├── user_repo / note_repo: AsyncMock repositories
    ├── fake_hasher: PasswordHasher double returning "hashed::<plaintext>"
    └── make_user / make_note: factories for ORM-shaped records

    Database fixtures (fresh in-memory SQLite per test):
    ├── engine: async engine with all tables created
    ├── db_session: AsyncSession bound to that engine
    └── test_client: HTTPX AsyncClient whose requests use the same engine
"""

import os
from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock
from uuid import uuid4

# Must be set before any technotes import: settings and the engine are
# built at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from technotes.database import Base, get_db_session
from technotes.models import Note, User
from technotes.repositories.note_repository import NoteRepository
from technotes.repositories.user_repository import UserRepository
from technotes.services.password_hasher import PasswordHasher


# ══════════════════════════════════════════════════════════════════════════
# Unit Fixtures
# ══════════════════════════════════════════════════════════════════════════

class FakeHasher(PasswordHasher):
    """Deterministic stand-in for bcrypt in service unit tests."""

    def __init__(self):
        self.calls = []

    async def hash(self, plaintext: str) -> str:
        self.calls.append(plaintext)
        return f"hashed::{plaintext}"

    async def verify(self, plaintext: str, hashed: str) -> bool:
        return hashed == f"hashed::{plaintext}"


@pytest.fixture
def fake_hasher():
    return FakeHasher()


@pytest.fixture
def user_repo():
    """UserRepository double; every coroutine method is an AsyncMock."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def note_repo():
    """NoteRepository double; every coroutine method is an AsyncMock."""
    return AsyncMock(spec=NoteRepository)


@pytest.fixture
def make_user():
    """Build an unsaved User with ids and timestamps filled in."""
    def _make(**overrides):
        now = datetime.now(timezone.utc)
        values = {
            "id": uuid4(),
            "username": "alice",
            "password": "hashed::pw123",
            "roles": ["Employee"],
            "active": True,
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        return User(**values)
    return _make


@pytest.fixture
def make_note():
    """Build an unsaved Note with ids and timestamps filled in."""
    def _make(**overrides):
        now = datetime.now(timezone.utc)
        values = {
            "id": uuid4(),
            "user": uuid4(),
            "title": "Shopping",
            "text": "milk",
            "completed": False,
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        return Note(**values)
    return _make


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def engine():
    """
    A private in-memory SQLite database with the full schema.

    StaticPool keeps one connection alive so every session sees the same
    in-memory database.
    """
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(engine):
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    get_db_session is overridden so each request gets its own session on the
    test engine, with the same commit/rollback behavior as production.
    """
    from technotes.main import app

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
