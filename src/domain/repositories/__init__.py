"""Domain data-access interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.
"""

from .base import GenericDao, ResourceDao
from .users import UserDao

__all__ = [
    "GenericDao",
    "ResourceDao",
    "UserDao",
]
