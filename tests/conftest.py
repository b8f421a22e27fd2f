"""Shared fixtures: in-memory DAOs and a fast password hasher.

No database connection is required by any unit test.
"""

import itertools

import pytest

pytest.register_assert_rewrite("src.testing")

from src.domain.models.users import User  # noqa: E402
from src.domain.repositories.base import ResourceDao  # noqa: E402
from src.domain.repositories.users import UserDao  # noqa: E402
from src.domain.services.generic import ResourceDaoService  # noqa: E402
from src.domain.services.users import DefaultUserService  # noqa: E402
from src.infrastructure.security.password_hasher import PasswordHasher  # noqa: E402


class InMemoryResourceDao(ResourceDao):
    """Dict-backed ResourceDao; ids are assigned sequentially from first_id."""

    def __init__(self, first_id: int = 1) -> None:
        self._rows = {}
        self._ids = itertools.count(first_id)
        self.deleted_ids = []

    async def get(self, id):
        return self._rows.get(id)

    async def list(self, limit=50, offset=0):
        return sorted(self._rows.values(), key=lambda r: r.id)[offset:offset + limit]

    async def list_all(self):
        return list(self._rows.values())

    async def count(self):
        return len(self._rows)

    async def create(self, entity):
        created = entity.model_copy(update={"id": next(self._ids)})
        self._rows[created.id] = created
        return created

    async def update(self, entity):
        if entity.id not in self._rows:
            raise ValueError(f"{type(entity).__name__} {entity.id} not found")
        self._rows[entity.id] = entity
        return entity

    async def delete(self, id):
        self.deleted_ids.append(id)
        self._rows.pop(id, None)


class InMemoryUserDao(InMemoryResourceDao, UserDao):
    async def find_by_login(self, login):
        return [u for u in self._rows.values() if u.login == login]


@pytest.fixture
def sample_dao():
    return InMemoryResourceDao()


@pytest.fixture
def sample_service(sample_dao):
    return ResourceDaoService(sample_dao)


@pytest.fixture
def user_dao():
    return InMemoryUserDao()


@pytest.fixture
def hasher():
    return PasswordHasher(["pbkdf2_sha256"])


@pytest.fixture
def user_service(user_dao, hasher):
    return DefaultUserService(user_dao, hasher)


@pytest.fixture
def alice():
    return User(login="alice", password="wonderland", first_name="Alice", permissions=("read",))
