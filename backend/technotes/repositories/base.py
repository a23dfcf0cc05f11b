"""
TechNotes Backend: Generic Repository
=====================================

What:  CRUD gateway over one ORM model, bound to a single AsyncSession.
How:   Every write is flushed immediately so constraint violations surface
       inside the service call (where they become ConflictError) rather than
       at commit time in the session dependency.

Error translation:
    IntegrityError on a unique index → UniqueViolation
    Any other IntegrityError         → RejectedWrite
    Any other SQLAlchemyError        → StorageError (details logged, not returned)

No retries: a failed statement propagates straight to the caller.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from technotes.database import Base
from technotes.exceptions import RejectedWrite, StorageError, UniqueViolation

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# PostgreSQL SQLSTATE for unique_violation
_PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the IntegrityError came from a unique index (PostgreSQL or SQLite)."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == _PG_UNIQUE_VIOLATION:
        return True
    if getattr(orig, "pgcode", None) == _PG_UNIQUE_VIOLATION:
        return True
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate key" in message


class Repository(Generic[ModelT]):
    """
    Base persistence gateway.

    Subclasses set `model` and add collection-specific lookups.

    Usage:
        users = UserRepository(session)
        user = await users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def collection(self) -> str:
        return self.model.__tablename__

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            if is_unique_violation(exc):
                logger.info("Unique constraint rejected %s on %s", operation, self.collection)
                raise UniqueViolation(
                    context={"collection": self.collection, "operation": operation},
                ) from exc
            logger.warning("Integrity error during %s on %s: %s", operation, self.collection, exc.orig)
            raise RejectedWrite(
                context={"collection": self.collection, "operation": operation},
            ) from exc
        except SQLAlchemyError as exc:
            logger.error(
                "Database error during %s on %s: %s",
                operation,
                self.collection,
                str(exc),
                exc_info=True,
            )
            raise StorageError(
                context={"collection": self.collection, "operation": operation},
            ) from exc

    # ── Reads ─────────────────────────────────────────────────────────────

    async def find_by_id(self, record_id: UUID) -> Optional[ModelT]:
        with self._translate_errors("find_by_id"):
            return await self.session.get(self.model, record_id)

    async def find_one(self, **fields: Any) -> Optional[ModelT]:
        """First record whose attributes equal all of `fields`, or None."""
        with self._translate_errors("find_one"):
            result = await self.session.execute(
                select(self.model).filter_by(**fields).limit(1)
            )
            return result.scalars().first()

    async def find_all(self) -> List[ModelT]:
        """Every record, in whatever order the database returns them."""
        with self._translate_errors("find_all"):
            result = await self.session.execute(select(self.model))
            return list(result.scalars().all())

    async def find_by_ids(self, record_ids: Iterable[UUID]) -> List[ModelT]:
        """Records whose id is in `record_ids`; unknown ids are skipped."""
        ids = list(set(record_ids))
        if not ids:
            return []
        with self._translate_errors("find_by_ids"):
            result = await self.session.execute(
                select(self.model).where(self.model.id.in_(ids))
            )
            return list(result.scalars().all())

    # ── Writes ────────────────────────────────────────────────────────────

    async def create(self, **values: Any) -> ModelT:
        """Insert a new record and flush so defaults (id, timestamps) are populated."""
        record = self.model(**values)
        with self._translate_errors("create"):
            self.session.add(record)
            await self.session.flush()
        return record

    async def save(self, record: ModelT) -> ModelT:
        """Flush in-place changes made to an existing record."""
        with self._translate_errors("save"):
            self.session.add(record)
            await self.session.flush()
        return record

    async def delete(self, record: ModelT) -> Dict[str, Any]:
        """
        Delete `record` and return a snapshot of its column values.

        The snapshot is taken before the DELETE so callers can still report
        what was removed.
        """
        snapshot = {
            attr.key: getattr(record, attr.key)
            for attr in inspect(self.model).column_attrs
        }
        with self._translate_errors("delete"):
            await self.session.delete(record)
            await self.session.flush()
        return snapshot
