"""Domain model package.

All domain objects are Pydantic models with no ORM or infrastructure
dependencies.  Import from this package to avoid coupling application code
to individual module paths.
"""

from .paging import Page, PageRequest
from .resource import Identifiable, Resource, SampleResource
from .users import User

__all__ = [
    "Identifiable",
    "Resource",
    "SampleResource",
    "User",
    "Page",
    "PageRequest",
]
