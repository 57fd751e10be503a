"""Entity store — async CRUD for a single model, keyed by integer identifier."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hoteldesk.database import Base, Database
from hoteldesk.errors import StorageFault

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Identifiers are stored as signed 64-bit integers.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def id_in_range(entity_id: int) -> bool:
    """Whether ``entity_id`` fits the integer column; larger values cannot exist."""
    return MIN_ID <= entity_id <= MAX_ID


@asynccontextmanager
async def storage_guard(database: Database, message: str) -> AsyncIterator[AsyncSession]:
    """Open a session and turn any SQLAlchemy failure into ``StorageFault``.

    ``message`` is what the caller sees; the underlying error is logged.
    """
    try:
        async with database.session() as session:
            yield session
    except SQLAlchemyError as exc:
        logger.exception("Storage operation failed: %s", message)
        raise StorageFault(message) from exc


class EntityStore(Generic[ModelT]):
    """Create/read/update/delete/list primitives for one entity kind.

    Every call runs in its own transaction.  ``update`` and ``delete`` report
    the number of rows changed so callers can tell "not found" (0) apart from
    success without a separate read.
    """

    def __init__(self, database: Database, model: type[ModelT], label: str) -> None:
        self.database = database
        self.model = model
        self.label = label

    def _guard(self, verb: str, plural: bool = False):
        noun = f"{self.label}s" if plural else self.label
        return storage_guard(self.database, f"Failed to {verb} {noun}")

    async def insert(self, values: dict[str, Any]) -> int:
        """Persist a new record and return its assigned identifier."""
        async with self._guard("create") as session:
            record = self.model(**values)
            session.add(record)
            await session.flush()
            new_id = record.id
        logger.info("Created %s %s", self.label, new_id)
        return new_id

    async def get(self, entity_id: int) -> ModelT | None:
        if not id_in_range(entity_id):
            return None
        async with self._guard("fetch") as session:
            return await session.get(self.model, entity_id)

    async def list(self, *order_by: Any) -> list[ModelT]:
        """Return all records ordered by the given column expressions."""
        async with self._guard("fetch", plural=True) as session:
            result = await session.execute(select(self.model).order_by(*order_by))
            return list(result.scalars().all())

    async def count(self, *criteria: Any) -> int:
        async with self._guard("count", plural=True) as session:
            result = await session.execute(select(func.count()).select_from(self.model).where(*criteria))
            return result.scalar_one()

    async def update(self, entity_id: int, values: dict[str, Any]) -> int:
        """Replace every given field of the record; return rows changed."""
        if not id_in_range(entity_id):
            return 0
        async with self._guard("update") as session:
            result = await session.execute(
                update(self.model)
                .where(self.model.id == entity_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            changed = result.rowcount
        if changed:
            logger.info("Updated %s %s", self.label, entity_id)
        return changed

    async def delete(self, entity_id: int) -> int:
        """Remove the record; return rows changed. Never cascades."""
        if not id_in_range(entity_id):
            return 0
        async with self._guard("delete") as session:
            result = await session.execute(
                delete(self.model).where(self.model.id == entity_id).execution_options(synchronize_session=False)
            )
            changed = result.rowcount
        if changed:
            logger.info("Deleted %s %s", self.label, entity_id)
        return changed
