"""Generic async data access for a single model class."""
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import Base

T = TypeVar("T", bound=Base)


class Repository(Generic[T]):
    """
    Thin wrapper around an AsyncSession for one model class.

    Writes are flushed, never committed. The session dependency (or the caller's
    own ``async with session.begin()``) owns the transaction boundary.

    Example:
        tags = Repository(db, Tag)
        tag = await tags.get_by_id(3)
        matches = await tags.find(Tag.name == "python")
    """

    def __init__(self, db: AsyncSession, model: type[T]) -> None:
        self.db = db
        self.model = model

    def _primary_key_order(self) -> list:
        return list(self.model.__table__.primary_key.columns)

    async def get_all(self) -> list[T]:
        """Return every row ordered by primary key (insertion order for serial ids)."""
        result = await self.db.execute(
            select(self.model).order_by(*self._primary_key_order()),
        )
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: Any) -> T | None:  # noqa: ANN401
        """Return the row with this primary key, or None."""
        return await self.db.get(self.model, entity_id)

    async def find(self, *criteria: ColumnElement[bool]) -> list[T]:
        """Return rows matching all criteria, ordered by primary key."""
        result = await self.db.execute(
            select(self.model).where(*criteria).order_by(*self._primary_key_order()),
        )
        return list(result.scalars().all())

    async def add(self, entity: T) -> T:
        """Insert the entity and flush so generated ids are populated."""
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Flush pending attribute changes on an attached entity."""
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity: T) -> None:
        """Delete the entity. Database-level cascades remove dependent rows."""
        await self.db.delete(entity)
        await self.db.flush()

    async def delete_many(self, entities: Sequence[T]) -> None:
        """Delete several entities with a single flush."""
        for entity in entities:
            await self.db.delete(entity)
        await self.db.flush()
