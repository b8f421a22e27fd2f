"""SQLAlchemy implementation of the SampleResource DAO."""

from __future__ import annotations

from src.domain.models.resource import SampleResource as DomainSample
from src.infrastructure.persistence.models.resources import SampleResource as OrmSample

from .base import SqlResourceDao


class SqlSampleResourceDao(SqlResourceDao[DomainSample]):
    orm_class = OrmSample

    @staticmethod
    def _to_domain(row: OrmSample) -> DomainSample:
        return DomainSample(id=row.id, ref=row.ref)

    @staticmethod
    def _to_row(entity: DomainSample) -> OrmSample:
        return OrmSample(id=entity.id, ref=entity.ref)

    @staticmethod
    def _apply(row: OrmSample, entity: DomainSample) -> None:
        row.ref = entity.ref
