"""Generic service contracts.

GenericService[T, ID] is the CRUD surface every persistence-backed domain
service exposes.  Lookups signal "not found" with None; mutations let
persistence errors (constraint violations and the like) propagate to the
caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.domain.models.paging import Page, PageRequest
from src.domain.models.resource import Resource

T = TypeVar("T")
ID = TypeVar("ID")
R = TypeVar("R", bound=Resource)


class GenericService(ABC, Generic[T, ID]):
    """Abstract CRUD service for entities of type T keyed by ID."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a transient entity and return it with its identifier populated."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Replace the persisted state of the entity identified by entity.id."""

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Remove the given entity, including the associations it owns."""

    @abstractmethod
    async def delete_by_id(self, id: ID) -> None:
        """Remove the entity with the given identifier; same effect as delete()."""

    @abstractmethod
    async def find_by_id(self, id: ID) -> T | None:
        """Return the entity, or None.  Never raises for a missing id."""

    @abstractmethod
    async def find_all(self) -> list[T]:
        """Return all persisted entities, in no particular order."""

    @abstractmethod
    async def find_page(self, request: PageRequest) -> Page[T]:
        """Return one page of entities together with the total count."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of persisted entities."""


class GenericResourceService(GenericService[R, int]):
    """GenericService narrowed to Resource subtypes keyed by a 64-bit integer."""
