"""Generic SQLAlchemy implementation of ResourceDao.

Subclasses name their ORM class and provide the three mapping hooks; the
primary-key column is looked up through the mapper, so the same queries
serve every resource table.  Writes are flushed (to obtain generated ids)
but never committed.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.resource import Resource
from src.domain.repositories.base import ResourceDao
from src.infrastructure.database import Base
from src.infrastructure.persistence.metamodel import primary_key_column, primary_key_of

R = TypeVar("R", bound=Resource)


class SqlResourceDao(ResourceDao[R]):
    orm_class: ClassVar[type[Base]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    @abstractmethod
    def _to_domain(row: Any) -> R:
        """Map an ORM row to its domain model."""

    @staticmethod
    @abstractmethod
    def _to_row(entity: R) -> Any:
        """Build a new ORM row from a domain model."""

    @staticmethod
    @abstractmethod
    def _apply(row: Any, entity: R) -> None:
        """Copy every mutable field of entity onto an existing row."""

    def _select(self) -> Select:
        return select(self.orm_class)

    async def _get_row(self, id: int) -> Any:
        stmt = self._select().where(primary_key_column(self.orm_class) == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get(self, id: int) -> R | None:
        row = await self._get_row(id)
        return self._to_domain(row) if row else None

    async def list(self, limit: int = 50, offset: int = 0) -> list[R]:
        stmt = (
            self._select()
            .order_by(primary_key_column(self.orm_class))
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    async def list_all(self) -> list[R]:
        stmt = self._select().order_by(primary_key_column(self.orm_class))
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self.orm_class)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def create(self, entity: R) -> R:
        row = self._to_row(entity)
        self._session.add(row)
        await self._session.flush()
        return entity.model_copy(update={"id": primary_key_of(row)})

    async def update(self, entity: R) -> R:
        row = await self._get_row(entity.id)
        if row is None:
            raise ValueError(f"{type(entity).__name__} {entity.id} not found")
        self._apply(row, entity)
        await self._session.flush()
        return entity

    async def delete(self, id: int) -> None:
        row = await self._get_row(id)
        if row is not None:
            await self._session.delete(row)
            await self._session.flush()
