"""Unit tests for ORM model structure.

Verifies table names, nullability, keys, cascades, and package
registration. No database connection is required.
"""

import src.infrastructure.persistence  # noqa: F401 — registers all mappers
from src.infrastructure.database import Base
from src.infrastructure.persistence.models import __all__ as models_all
from src.infrastructure.persistence.models.identity import User, UserPermission
from src.infrastructure.persistence.models.resources import SampleResource


def test_models_export_every_mapper():
    assert set(models_all) == {"SampleResource", "User", "UserPermission"}


def test_all_tables_registered_on_metadata():
    assert {"sample_resources", "users", "user_permissions"} <= set(Base.metadata.tables)


def test_sample_resource_ref_is_nullable():
    assert SampleResource.__table__.c["ref"].nullable is True


def test_resource_ids_are_64_bit_autoincrement():
    for model in (SampleResource, User):
        column = model.__table__.c["id"]
        assert column.primary_key is True
        assert column.type.__class__.__name__ == "BigInteger"
        assert column.autoincrement is True


def test_user_login_is_indexed_but_not_unique():
    column = User.__table__.c["login"]
    assert column.index is True
    assert not column.unique


def test_user_login_and_password_are_required():
    assert User.__table__.c["login"].nullable is False
    assert User.__table__.c["password"].nullable is False


def test_user_permission_has_two_column_pk():
    pk_cols = [c.name for c in UserPermission.__table__.primary_key.columns]
    assert pk_cols == ["user_id", "permission"]


def test_user_permission_fk_cascades_on_delete():
    fk = next(iter(UserPermission.__table__.c["user_id"].foreign_keys))
    assert fk.ondelete == "CASCADE"


def test_user_permissions_relationship_deletes_orphans():
    cascade = User.__mapper__.relationships["permissions"].cascade
    assert cascade.delete and cascade.delete_orphan
