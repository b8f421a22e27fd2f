"""Primary-key lookup through the SQLAlchemy mapper (the ORM metamodel).

Lets generic DAOs address any mapped class by its identifier without
knowing the name of the key column.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Column, inspect


def primary_key_column(orm_class: type) -> Column[Any]:
    """Return the single primary-key column of a mapped class.

    Raises ValueError for composite keys.
    """
    columns = inspect(orm_class).primary_key
    if len(columns) != 1:
        raise ValueError(
            f"{orm_class.__name__} has a composite primary key ({len(columns)} columns)"
        )
    return columns[0]


def primary_key_of(row: object) -> Any:
    """Return the primary-key value of a mapped instance (None until assigned)."""
    mapper = inspect(row).mapper
    if len(mapper.primary_key) != 1:
        raise ValueError(f"{type(row).__name__} has a composite primary key")
    return mapper.primary_key_from_instance(row)[0]
