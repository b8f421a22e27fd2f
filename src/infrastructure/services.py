"""Service wiring: binds every domain service to one AsyncSession."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.resource import SampleResource
from src.domain.services.generic import ResourceDaoService
from src.domain.services.users import DefaultUserService
from src.infrastructure.database import settings
from src.infrastructure.persistence.repositories import get_daos
from src.infrastructure.security.password_hasher import PasswordHasher


@dataclass
class Services:
    """All service instances sharing one session (one unit of work)."""

    samples: ResourceDaoService[SampleResource]
    users: DefaultUserService


def get_services(session: AsyncSession, password_hasher: PasswordHasher | None = None) -> Services:
    """Construct all services bound to the given session.

    Typical use, inside the transaction opened by get_session():

        async for session in get_session():
            services = get_services(session)
            user = await services.users.authenticate_user(login, password)
    """
    daos = get_daos(session)
    hasher = password_hasher or PasswordHasher(settings.password_schemes)
    return Services(
        samples=ResourceDaoService(daos.samples),
        users=DefaultUserService(daos.users, hasher),
    )
