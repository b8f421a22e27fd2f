"""Concrete SQLAlchemy DAO implementations.

Exports all Sql*Dao classes and the get_daos() factory function for wiring
at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .base import SqlResourceDao
from .samples import SqlSampleResourceDao
from .users import SqlUserDao


@dataclass
class Daos:
    """All DAO instances bound to a single AsyncSession."""

    samples: SqlSampleResourceDao
    users: SqlUserDao


def get_daos(session: AsyncSession) -> Daos:
    """Construct all DAOs bound to the given session."""
    return Daos(
        samples=SqlSampleResourceDao(session),
        users=SqlUserDao(session),
    )


__all__ = [
    "SqlResourceDao",
    "SqlSampleResourceDao",
    "SqlUserDao",
    "Daos",
    "get_daos",
]
