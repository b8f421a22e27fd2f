"""Resource domain models.

These are pure domain objects — no ORM or persistence concerns.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


@runtime_checkable
class Identifiable(Protocol):
    """Anything that exposes its own surrogate identifier as ``id``."""

    @property
    def id(self) -> Any: ...


class Resource(BaseModel):
    """Base persistent entity with a surrogate 64-bit identifier.

    id is None while the resource is transient; the persistence layer assigns
    it on create and it never changes afterwards.  Once both sides of a
    comparison are persisted, equality is identifier-based.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    ref: str | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        if self.id is not None and other.id is not None:
            return type(self) is type(other) and self.id == other.id
        return super().__eq__(other)

    def __hash__(self) -> int:
        if self.id is not None:
            return hash((type(self), self.id))
        return hash((type(self), *self.__dict__.values()))


class SampleResource(Resource):
    """Minimal concrete resource used as a test fixture."""
