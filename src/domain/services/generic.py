"""DAO-backed GenericService implementations.

GenericDaoService delegates every operation to a GenericDao.  Transaction
boundaries stay with the caller: the DAO flushes, the session owner commits.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from src.domain.models.paging import Page, PageRequest
from src.domain.models.resource import Identifiable, Resource
from src.domain.repositories.base import GenericDao, ResourceDao

from .base import GenericResourceService, GenericService

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Identifiable)
ID = TypeVar("ID")
R = TypeVar("R", bound=Resource)


class GenericDaoService(GenericService[T, ID]):
    def __init__(self, dao: GenericDao[T, ID]) -> None:
        self._dao = dao

    @property
    def dao(self) -> GenericDao[T, ID]:
        return self._dao

    async def create(self, entity: T) -> T:
        created = await self._dao.create(entity)
        logger.debug("Created %s %s", type(created).__name__, created.id)
        return created

    async def update(self, entity: T) -> T:
        if entity.id is None:
            raise ValueError(f"Cannot update a transient {type(entity).__name__}")
        return await self._dao.update(entity)

    async def delete(self, entity: T) -> None:
        if entity.id is None:
            raise ValueError(f"Cannot delete a transient {type(entity).__name__}")
        await self.delete_by_id(entity.id)

    async def delete_by_id(self, id: ID) -> None:
        await self._dao.delete(id)
        logger.debug("Deleted entity %s", id)

    async def find_by_id(self, id: ID) -> T | None:
        return await self._dao.get(id)

    async def find_all(self) -> list[T]:
        return await self._dao.list_all()

    async def find_page(self, request: PageRequest) -> Page[T]:
        content = await self._dao.list(limit=request.size, offset=request.offset)
        total = await self._dao.count()
        return Page.of(content, total, request)

    async def count(self) -> int:
        return await self._dao.count()


class ResourceDaoService(GenericDaoService[R, int], GenericResourceService[R]):
    """GenericDaoService for Resource subtypes."""

    def __init__(self, dao: ResourceDao[R]) -> None:
        super().__init__(dao)
