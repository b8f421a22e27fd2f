"""ORM model registry — imports all layer modules so every mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from src.infrastructure.persistence.models.resources import SampleResource
from src.infrastructure.persistence.models.identity import User, UserPermission

__all__ = [
    "SampleResource",
    "User",
    "UserPermission",
]
