"""SQLAlchemy implementation of UserDao."""

from __future__ import annotations

from sqlalchemy import Select
from sqlalchemy.orm import selectinload

from src.domain.models.users import User as DomainUser
from src.domain.repositories.users import UserDao
from src.infrastructure.persistence.models.identity import User as OrmUser
from src.infrastructure.persistence.models.identity import UserPermission as OrmPermission

from .base import SqlResourceDao


class SqlUserDao(SqlResourceDao[DomainUser], UserDao):
    orm_class = OrmUser

    @staticmethod
    def _to_domain(row: OrmUser) -> DomainUser:
        return DomainUser(
            id=row.id,
            ref=row.ref,
            login=row.login,
            password=row.password,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            permissions=tuple(p.permission for p in row.permissions),
        )

    @staticmethod
    def _to_row(entity: DomainUser) -> OrmUser:
        return OrmUser(
            id=entity.id,
            ref=entity.ref,
            login=entity.login,
            password=entity.password,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            permissions=[OrmPermission(permission=p) for p in entity.permissions],
        )

    @staticmethod
    def _apply(row: OrmUser, entity: DomainUser) -> None:
        row.ref = entity.ref
        row.login = entity.login
        row.password = entity.password
        row.first_name = entity.first_name
        row.last_name = entity.last_name
        row.email = entity.email
        # Keep surviving rows so an unchanged permission is never deleted and re-inserted.
        kept = [p for p in row.permissions if p.permission in entity.permissions]
        existing = {p.permission for p in kept}
        row.permissions = kept + [
            OrmPermission(permission=p) for p in entity.permissions if p not in existing
        ]

    def _select(self) -> Select:
        return super()._select().options(selectinload(OrmUser.permissions))

    async def find_by_login(self, login: str) -> list[DomainUser]:
        stmt = self._select().where(OrmUser.login == login).order_by(OrmUser.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]
