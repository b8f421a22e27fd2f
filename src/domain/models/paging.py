"""Paging value objects shared by DAOs and services."""

from __future__ import annotations

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageRequest(BaseModel):
    """Zero-based page index and page size."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1, le=500)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """One slice of a larger result set, plus the total element count."""

    model_config = ConfigDict(frozen=True)

    content: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=0)
    size: int = Field(ge=1)

    @classmethod
    def of(cls, content: list[T], total: int, request: PageRequest) -> Page[T]:
        return cls(content=content, total=total, page=request.page, size=request.size)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages
