"""User DAO interface."""

from __future__ import annotations

from abc import abstractmethod

from src.domain.models.users import User

from .base import ResourceDao


class UserDao(ResourceDao[User]):
    """Read/write interface for User entities.

    find_by_login returns every match so that callers can tell a unique
    login from duplicated data.
    """

    @abstractmethod
    async def find_by_login(self, login: str) -> list[User]:
        """Return all users whose login equals the given value (exact match)."""
