"""Generic data-access interfaces.

GenericDao[T, ID] is the root abstraction for all data-access interfaces in
this domain layer.  Concrete implementations live in
src/infrastructure/persistence/ and are wired at the application boundary via
dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO).
  - list() accepts only limit/offset; domain-specific lookups are declared
    on each specialised interface (Interface Segregation Principle).
  - Implementations never commit: the caller owns the transaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.domain.models.resource import Resource

T = TypeVar("T")
ID = TypeVar("ID")
R = TypeVar("R", bound=Resource)


class GenericDao(ABC, Generic[T, ID]):
    """Abstract CRUD interface for entities of type T keyed by ID."""

    @abstractmethod
    async def get(self, id: ID) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def list(self, limit: int = 50, offset: int = 0) -> list[T]:
        """Return a page of entities ordered by primary key."""

    @abstractmethod
    async def list_all(self) -> list[T]:
        """Return every stored entity."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entities."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it (with any DB-generated fields populated)."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist changes to an existing entity and return the updated version."""

    @abstractmethod
    async def delete(self, id: ID) -> None:
        """Remove the entity with the given primary key (no-op when absent)."""


class ResourceDao(GenericDao[R, int]):
    """GenericDao narrowed to Resource subtypes keyed by a 64-bit integer.

    Declares no operations of its own; concrete DAOs inherit from it so they
    do not repeat the identifier type.
    """
