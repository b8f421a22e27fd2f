"""User service contract and its DAO-backed implementation."""

from __future__ import annotations

import logging
from abc import abstractmethod

from src.domain.models.users import User
from src.domain.repositories.users import UserDao
from src.infrastructure.security.password_hasher import PasswordHasher

from .base import GenericResourceService
from .generic import ResourceDaoService

logger = logging.getLogger(__name__)


class UserService(GenericResourceService[User]):
    """User services: generic CRUD plus login lookup and authentication.

    Both lookups are pure queries.  "No such login" and "more than one user
    with that login" give the same answer: None.
    """

    @abstractmethod
    async def find_by_login(self, login: str) -> User | None:
        """Return the user with this login, or None if zero or several match."""

    @abstractmethod
    async def authenticate_user(self, login: str, password: str) -> User | None:
        """Return the user if the login is unique and the password verifies, else None."""


class DefaultUserService(ResourceDaoService[User], UserService):
    """UserService backed by a UserDao; passwords are stored hashed."""

    def __init__(self, dao: UserDao, password_hasher: PasswordHasher) -> None:
        super().__init__(dao)
        self._users = dao
        self.password_hasher = password_hasher

    def _with_hashed_password(self, user: User) -> User:
        if self.password_hasher.is_hashed(user.password):
            return user
        return user.model_copy(update={"password": self.password_hasher.hash(user.password)})

    async def create(self, entity: User) -> User:
        return await super().create(self._with_hashed_password(entity))

    async def update(self, entity: User) -> User:
        return await super().update(self._with_hashed_password(entity))

    async def find_by_login(self, login: str) -> User | None:
        users = await self._users.find_by_login(login)
        if len(users) > 1:
            logger.warning("Login '%s' matches %d users; treating as not found", login, len(users))
            return None
        return users[0] if users else None

    async def authenticate_user(self, login: str, password: str) -> User | None:
        user = await self.find_by_login(login)
        if user is None:
            logger.warning("Authentication failed: no unique user for login '%s'", login)
            return None

        try:
            verified = self.password_hasher.verify(password, user.password)
        except ValueError:
            logger.warning("Authentication failed: unreadable password hash for '%s'", login)
            return None

        if not verified:
            logger.warning("Authentication failed: invalid password for '%s'", login)
            return None
        return user
